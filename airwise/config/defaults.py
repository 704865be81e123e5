"""Environment variable names and fixed fallback texts."""

# credentials field -> environment variable
CREDENTIAL_ENV_VARS: dict[str, str] = {
    "aqicn_api_key": "AQICN_API_KEY",
    "openweathermap_api_key": "OPENWEATHERMAP_API_KEY",
    "youtube_api_key": "YOUTUBE_API_KEY",
    "reddit_client_id": "REDDIT_CLIENT_ID",
    "reddit_client_secret": "REDDIT_CLIENT_SECRET",
    "reddit_username": "REDDIT_USERNAME",
    "reddit_password": "REDDIT_PASSWORD",
    "reddit_user_agent": "REDDIT_USER_AGENT",
    "gemini_api_key": "GEMINI_API_KEY",
}
DEMO_MODE_ENV_VAR = "AIRWISE_DEMO_MODE"

FALLBACK_ADVISORY = (
    "The AI Health Advisory service is currently unavailable. Based on the "
    "current AQI, consider limiting outdoor activities if you are in a "
    "sensitive group. Those with respiratory conditions should be especially "
    "careful."
)
FALLBACK_CHAT_RESPONSE = (
    "I'm sorry, the Health Assistant is currently unavailable. "
    "Please try again later."
)
FALLBACK_TIPS = (
    "Could not generate AI-powered tips at the moment. \n\n"
    "**General advice:** To improve air quality, consider using public "
    "transport, conserving energy at home, and avoiding burning waste."
)
NO_NEWS_SUMMARY = "No recent news found for this location."
FALLBACK_NEWS_SUMMARY = (
    "The AI news summary is currently unavailable. Please browse the "
    "articles below for the latest updates."
)
NEWS_UNAVAILABLE_SUMMARY = "Could not fetch news at this time."

NO_CURRENT_DATA_ERROR = (
    "Could not fetch current air quality data for the specified location. "
    "Please try another city."
)
NETWORK_FAILURE_ERROR = (
    "Failed to fetch air quality data. Please check your internet "
    "connection and API keys."
)
UNEXPECTED_ERROR = "An unexpected error occurred while fetching air quality data."
REVERSE_GEOCODE_ERROR = (
    "Could not automatically determine your city. Please type it manually."
)
HEALTH_REPORT_ERROR = (
    "Could not extract text from the health report. Please paste the "
    "relevant details manually."
)

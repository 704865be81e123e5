"""Prompt templates for the Gemini-backed capabilities."""

GEOCODE_CITY = """You are a geocoding expert. Given a city name, you will return its latitude and longitude.

City: {city}

Respond with JSON: {{"latitude": <latitude>, "longitude": <longitude>}}"""

REVERSE_GEOCODE = """You are a reverse geocoding expert. Given a latitude and longitude, you will return the corresponding city name. Only return the city name.

Latitude: {latitude}
Longitude: {longitude}

Respond with JSON: {{"city": "<city_name>"}}"""

HEALTH_ADVISORY = """You are a health advisor specializing in air quality and its impact on health.

Based on the user's personal information and the current air quality conditions, provide personalized health recommendations.
Translate the advisory to the language specified by the user.

User Information:
- Name: {name}
- Age: {age}
- Location: {location}
- Health Conditions: {health_conditions}
- Language Preference: {language_preference}
{health_report_section}
Air Quality Information:
- AQI: {aqi} ({aqi_category})
- Pollutants: {pollutants}

Provide a detailed and personalized health advisory, considering all the provided information. The health advisory MUST be in the language specified in Language Preference."""

HEALTH_REPORT_SECTION = """
Health Report Excerpt:
{health_report}
"""

NEWS_TITLE = """Based on the following news snippet, generate a concise and relevant title of 5 to 10 words.

Snippet: {snippet}"""

SUMMARIZE_NEWS = """You are a news analyst specializing in environmental topics.

Based on the following list of news articles and video titles for {location}, provide a concise summary of the current air quality situation. Highlight any significant events, trends, or official announcements. The summary should be a single paragraph.

News Items:
{items}"""

NEWS_ITEM_LINE = "- [{source}]: {title} - {snippet}"

POLLUTION_TIPS = """You are an environmental expert specializing in air quality management.

Based on the user's location and current air quality conditions, provide a list of actionable tips to help reduce air pollution in their area and maintain a good AQI.

The tips should be practical and divided into two categories:
1. **Community Actions**: Things the community can do together (e.g., promoting public transport, organizing tree-planting drives, advocating for stricter emission norms).
2. **Personal Actions**: Things an individual can do (e.g., reducing personal vehicle use, conserving energy, avoiding burning waste, using air purifiers).

User Location: {location}
Current AQI: {aqi}
Main Pollutants: {pollutants}

Be helpful and encouraging. Format the tips as a markdown list."""

CHAT = """You are a friendly health assistant for an air quality app. Answer questions about air quality, pollution, and how they affect health. Keep answers short and practical, and suggest seeing a doctor for medical concerns.

{history}User: {message}
Assistant:"""

EXTRACT_HEALTH_REPORT = """You are an expert OCR (Optical Character Recognition) tool specialized in medical documents.

Extract all the text from the attached document. Maintain the structure and formatting as much as possible."""

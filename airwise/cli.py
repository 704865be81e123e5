"""CLI entry point for the air quality advisory service."""

import argparse
import asyncio
import logging

from airwise.actions import Actions
from airwise.config.loader import get_config_value, load_config, redacted_dump
from airwise.reporting.formatters import (
    format_advisory_text,
    format_health_text,
    format_news_text,
    to_json,
)
from airwise.reporting.health_checker import HealthChecker

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="airwise",
        description="Personalized air quality health advisories",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print machine-readable JSON"
    )

    sub = parser.add_subparsers(dest="command")

    # advisory
    adv_p = sub.add_parser("advisory", help="Generate a health advisory")
    adv_p.add_argument("--name", required=True)
    adv_p.add_argument("--age", required=True)
    adv_p.add_argument("--location", required=True)
    adv_p.add_argument("--conditions", default=None, help="Health conditions")
    adv_p.add_argument("--language", default="en")

    # news
    news_p = sub.add_parser("news", help="News digest for a city")
    news_p.add_argument("city")

    # tips
    tips_p = sub.add_parser("tips", help="Pollution reduction tips")
    tips_p.add_argument("--location", required=True)
    tips_p.add_argument("--aqi", type=float, required=True)
    tips_p.add_argument("--pollutants", default="")

    # chat
    chat_p = sub.add_parser("chat", help="Ask the health assistant")
    chat_p.add_argument("message")

    # reverse-geocode
    rg_p = sub.add_parser("reverse-geocode", help="City name for coordinates")
    rg_p.add_argument("latitude", type=float)
    rg_p.add_argument("longitude", type=float)

    # health
    health_p = sub.add_parser("health", help="Check data source configuration")
    health_p.add_argument(
        "--probe", action="store_true", help="Also ping each endpoint"
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. forecast.days")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8777)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "health":
        return _cmd_health(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command in _ACTION_COMMANDS:
        return asyncio.run(_ACTION_COMMANDS[args.command](Actions(config), args))
    else:
        parser.print_help()
        return 1


def _print_result(result, args, formatter=None) -> int:
    if result.error is not None:
        print(f"Error: {result.error}")
        return 1
    if args.json or formatter is None:
        print(to_json(result.data))
    else:
        print(formatter(result.data))
    return 0


async def _cmd_advisory(actions: Actions, args) -> int:
    result = await actions.get_health_advisory({
        "name": args.name,
        "age": args.age,
        "location": args.location,
        "health_conditions": args.conditions,
        "language_preference": args.language,
    })
    return _print_result(result, args, format_advisory_text)


async def _cmd_news(actions: Actions, args) -> int:
    result = await actions.get_news({"city": args.city})
    return _print_result(result, args, format_news_text)


async def _cmd_tips(actions: Actions, args) -> int:
    result = await actions.get_pollution_reduction_tips({
        "location": args.location,
        "aqi": args.aqi,
        "pollutants": args.pollutants,
    })
    return _print_result(result, args, lambda d: d["tips"])


async def _cmd_chat(actions: Actions, args) -> int:
    result = await actions.chat({"message": args.message})
    return _print_result(result, args, lambda d: d["response"])


async def _cmd_reverse_geocode(actions: Actions, args) -> int:
    result = await actions.reverse_geocode({
        "latitude": args.latitude,
        "longitude": args.longitude,
    })
    return _print_result(result, args, lambda d: d["city"])


_ACTION_COMMANDS = {
    "advisory": _cmd_advisory,
    "news": _cmd_news,
    "tips": _cmd_tips,
    "chat": _cmd_chat,
    "reverse-geocode": _cmd_reverse_geocode,
}


def _cmd_health(config, args) -> int:
    status = asyncio.run(HealthChecker(config).check(probe=args.probe))
    print(to_json(status) if args.json else format_health_text(status))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    elif args.config_command == "get":
        if args.key.startswith("credentials."):
            print("Error: credentials are not printed")
            return 1
        try:
            print(f"{args.key} = {get_config_value(config, args.key)}")
            return 0
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from airwise.api import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI entry point for the StormGlass forecast client."""

import argparse
import asyncio
import json
import logging

from surfcast.config.defaults import DEFAULT_CONFIG_PATH
from surfcast.config.loader import get_config_value, load_config, redacted_json
from surfcast.config.schema import SurfcastConfig
from surfcast.errors import InternalError
from surfcast.ingest.stormglass_client import StormGlassClient


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="surfcast",
        description="Marine point forecasts from StormGlass",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch forecast points for a coordinate")
    fetch_p.add_argument("--lat", type=float, required=True, help="Latitude")
    fetch_p.add_argument("--lng", type=float, required=True, help="Longitude")
    fetch_p.add_argument(
        "--dry-run", action="store_true", help="Print the request, do not send it"
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. stormglass.source")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=config.logging.level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_fetch(config: SurfcastConfig, args) -> int:
    client = StormGlassClient(config.stormglass)
    if args.dry_run:
        print(f"GET {client.url}")
        print(json.dumps(client.build_params(args.lat, args.lng), indent=2))
        return 0
    try:
        points = asyncio.run(client.fetch_points(args.lat, args.lng))
    except InternalError as e:
        print(f"Error: {e}")
        return 1
    print(json.dumps([p.to_dict() for p in points], indent=2))
    return 0


def _cmd_config(config: SurfcastConfig, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    elif args.config_command == "get":
        if args.key == "stormglass.api_token":
            print("Error: the API token is not printed")
            return 1
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    print("Use: config show | config get KEY")
    return 1

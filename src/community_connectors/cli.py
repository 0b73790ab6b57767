"""Command-line interface for the community connectors."""

import argparse
import asyncio
import json
import sys

import structlog
import uvicorn

from community_connectors.api.service import ConnectorService
from community_connectors.config import get_settings
from community_connectors.connectors.registry import connector_names
from community_connectors.errors import ConnectorError, UserError
from community_connectors.models.requests import (
    Credentials,
    DataRequest,
    DateRange,
    RequestedField,
    SchemaRequest,
)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(0),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def parse_params(pairs: list[str] | None) -> dict[str, str]:
    """Turn repeated ``key=value`` arguments into config params."""
    params = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        params[key.strip()] = value
    return params


def _credentials(args) -> Credentials:
    return Credentials(token=args.token, username=args.username)


def _print(model):
    print(json.dumps(model.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))


def cmd_serve(args):
    """Start the API server."""
    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port

    logger.info("starting_server", host=host, port=port)

    uvicorn.run(
        "community_connectors.api.app:app",
        host=host,
        port=port,
        reload=args.reload,
    )


def cmd_config(args):
    """Print the config screen of a connector."""
    service = ConnectorService()
    _print(service.get_auth_type(args.connector))
    _print(service.get_config(args.connector))


def cmd_schema(args):
    """Print every field a connector provides."""
    service = ConnectorService()
    request = SchemaRequest(config_params=parse_params(args.param))
    response = asyncio.run(service.get_schema(args.connector, request, _credentials(args)))
    _print(response)


def cmd_data(args):
    """Fetch rows and print them as JSON."""
    service = ConnectorService()
    date_range = None
    if args.start_date and args.end_date:
        date_range = DateRange(start_date=args.start_date, end_date=args.end_date)

    request = DataRequest(
        config_params=parse_params(args.param),
        fields=[RequestedField(name=field_id) for field_id in args.field],
        date_range=date_range,
    )
    response = asyncio.run(service.get_data(args.connector, request, _credentials(args)))
    _print(response)


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="community-connectors",
        description="GitHub and Jira connectors for reporting dashboards",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", type=str, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    # config command
    config_parser = subparsers.add_parser("config", help="Show auth type and config inputs")
    config_parser.add_argument("connector", choices=connector_names())
    config_parser.set_defaults(func=cmd_config)

    for name, help_text, func in (
        ("schema", "Show the fields of a connector", cmd_schema),
        ("data", "Fetch rows for the given fields", cmd_data),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("connector", choices=connector_names())
        sub.add_argument(
            "--param", "-p", action="append", help="Config param as key=value (repeatable)"
        )
        sub.add_argument("--token", help="OAuth or API token (defaults to settings)")
        sub.add_argument("--username", help="Username for basic auth")
        sub.set_defaults(func=func)

        if name == "data":
            sub.add_argument(
                "--field", "-f", action="append", required=True, help="Field id (repeatable)"
            )
            sub.add_argument("--start-date", help="Date range start (YYYY-MM-DD)")
            sub.add_argument("--end-date", help="Date range end (YYYY-MM-DD)")

    args = parser.parse_args()
    try:
        args.func(args)
    except UserError as e:
        logger.error("user_error", text=e.text, debug=e.debug_text)
        sys.exit(1)
    except (ConnectorError, argparse.ArgumentTypeError) as e:
        logger.error("command_failed", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()

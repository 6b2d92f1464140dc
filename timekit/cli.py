#!/usr/bin/env python3
"""
Timekit Command Line Interface

Main entry point for the `timekit` command. Each subcommand calls one
read-only endpoint and prints the JSON body.

Usage:
    timekit auth user@example.com password
    timekit --email user@example.com --api-token TOKEN calendars
    timekit calendar 1e396a70-1919-11e5-a165-080027c7e7dd
    timekit events 2015-09-22T00:00:00Z 2015-09-29T00:00:00Z
    timekit google-signup-url --callback https://example.com/done
"""

import argparse
import asyncio
import json
import sys

from timekit import __version__
from timekit.client import TimekitClient
from timekit.config import load_config
from timekit.exceptions import TimekitError
from timekit.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def _build_client(args) -> TimekitClient:
    """Create a client from config files, env, then command-line flags."""
    config = load_config(args.config)
    client = TimekitClient(config=config)

    options = {
        "app": args.app,
        "api_base_url": args.api_base_url,
        "timezone": args.timezone,
    }
    client.configure({k: v for k, v in options.items() if v is not None})

    if args.email and args.api_token:
        client.set_user(args.email, args.api_token)
    return client


async def _dispatch(client: TimekitClient, args):
    """Run the endpoint call for a subcommand."""
    command = args.command
    if command == "auth":
        return await client.auth(args.user_email, args.password)
    if command == "accounts":
        return await client.get_accounts()
    if command == "calendars":
        return await client.get_calendars()
    if command == "calendar":
        return await client.get_calendar(args.token)
    if command == "contacts":
        return await client.get_contacts()
    if command == "events":
        return await client.get_events(args.start, args.end)
    if command == "availability":
        return await client.get_availability(args.start, args.end, args.availability_email)
    if command == "meetings":
        return await client.get_meetings()
    if command == "meeting":
        return await client.get_meeting(args.token)
    if command == "me":
        return await client.get_user_info()
    if command == "properties":
        return await client.get_user_properties()
    if command == "property":
        return await client.get_user_property(args.key)
    raise ValueError(f"Unknown command: {command}")


def cmd_google_signup_url(args) -> int:
    client = _build_client(args)
    print(client.account_google_signup(callback=args.callback))
    return 0


def cmd_call(args) -> int:
    """Handle every endpoint subcommand."""
    client = _build_client(args)
    try:
        response = asyncio.run(_dispatch(client, args))
    except TimekitError as e:
        logger.error("request_failed", status=e.status, message=e.message)
        print(json.dumps(e.to_dict(), indent=2))
        return 1

    print(json.dumps(response.to_dict(), indent=2, default=str))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timekit",
        description="Timekit API client",
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version and exit"
    )
    parser.add_argument("--config", default=None, help="Path to timekit.yaml")
    parser.add_argument("--app", default=None, help="Timekit app identifier")
    parser.add_argument("--api-base-url", default=None, help="API base URL")
    parser.add_argument("--timezone", default=None, help="Timezone sent with each request")
    parser.add_argument("--email", default=None, help="User email for authenticated calls")
    parser.add_argument("--api-token", default=None, help="User API token")
    parser.add_argument("--log-level", default=None, help="Log level (default: WARNING)")
    parser.add_argument(
        "--json-logs", action="store_true", default=None, help="Emit logs as JSON"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    auth_parser = subparsers.add_parser("auth", help="Exchange email/password for an API token")
    auth_parser.add_argument("user_email", help="Account email")
    auth_parser.add_argument("password", help="Account password")
    auth_parser.set_defaults(func=cmd_call)

    signup_parser = subparsers.add_parser(
        "google-signup-url", help="Print the Google signup URL (no request is made)"
    )
    signup_parser.add_argument("--callback", default=None, help="Redirect URL after signup")
    signup_parser.set_defaults(func=cmd_google_signup_url)

    for name, help_text in (
        ("accounts", "List connected accounts"),
        ("calendars", "List calendars"),
        ("contacts", "List contacts"),
        ("meetings", "List meetings"),
        ("me", "Show the current user"),
        ("properties", "List user properties"),
    ):
        subparsers.add_parser(name, help=help_text).set_defaults(func=cmd_call)

    calendar_parser = subparsers.add_parser("calendar", help="Show one calendar")
    calendar_parser.add_argument("token", help="Calendar token")
    calendar_parser.set_defaults(func=cmd_call)

    meeting_parser = subparsers.add_parser("meeting", help="Show one meeting")
    meeting_parser.add_argument("token", help="Meeting token")
    meeting_parser.set_defaults(func=cmd_call)

    property_parser = subparsers.add_parser("property", help="Show one user property")
    property_parser.add_argument("key", help="Property key")
    property_parser.set_defaults(func=cmd_call)

    events_parser = subparsers.add_parser("events", help="List events in a time range")
    events_parser.add_argument("start", help="Range start (ISO 8601)")
    events_parser.add_argument("end", help="Range end (ISO 8601)")
    events_parser.set_defaults(func=cmd_call)

    availability_parser = subparsers.add_parser(
        "availability", help="Show a user's availability in a time range"
    )
    availability_parser.add_argument("start", help="Range start (ISO 8601)")
    availability_parser.add_argument("end", help="Range end (ISO 8601)")
    availability_parser.add_argument("availability_email", metavar="email", help="User email")
    availability_parser.set_defaults(func=cmd_call)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Handle --version at top level
    if args.version:
        print(f"timekit {__version__}")
        return 0

    # If no command given, show help
    if not args.command:
        parser.print_help()
        return 0

    setup_logging(level=args.log_level, json_output=args.json_logs)

    result = args.func(args)

    # Commands may return an exit code
    if isinstance(result, int) and result != 0:
        sys.exit(result)
    return result


if __name__ == "__main__":
    main()

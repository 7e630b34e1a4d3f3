"""
Sleeper Assistant CLI

Command-line interface for listing and calling tools without running the
API server.
"""

import argparse
import asyncio
import json
import sys

from sleeper_assistant.assistant import SleeperAssistant
from sleeper_assistant.main import configure_logging, run
from sleeper_assistant.tools import ErrorResult, build_registry, dump_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sleeper Fantasy Football Assistant CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List every tool
  sleeper-assistant tools

  # Show your matchup for this week
  sleeper-assistant call show_my_matchup

  # Preview a specific matchup
  sleeper-assistant call preview_matchup --args '{"league_id": "1127116641403351040", "week": 5, "roster_id": 3}'

  # Run the HTTP API
  sleeper-assistant serve
        """,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: from SLEEPER_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # tools command
    subparsers.add_parser("tools", help="List available tools")

    # call command
    call_parser = subparsers.add_parser("call", help="Call a tool and print its JSON result")
    call_parser.add_argument("name", help="Tool name")
    call_parser.add_argument(
        "--args", "-a",
        dest="arguments",
        default="{}",
        help="Tool arguments as a JSON object (default: {})",
    )

    # serve command
    subparsers.add_parser("serve", help="Run the HTTP API server")

    return parser


async def cli_main(args: argparse.Namespace) -> int:
    """Run a tools/call command; returns the process exit code."""
    async with SleeperAssistant() as assistant:
        registry = build_registry(assistant)

        if args.command == "tools":
            for tool in registry.list_tools():
                print(f"{tool['name']:<26} {tool['description']}")
            return 0

        try:
            arguments = json.loads(args.arguments)
        except json.JSONDecodeError as e:
            print(f"Invalid --args JSON: {e}", file=sys.stderr)
            return 2
        if not isinstance(arguments, dict):
            print("--args must be a JSON object", file=sys.stderr)
            return 2

        result = await registry.dispatch(args.name, arguments)
        print(json.dumps(dump_result(result), indent=2))
        return 1 if isinstance(result, ErrorResult) else 0


def run_cli(argv: list[str] | None = None) -> None:
    """Entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)

    if args.command == "serve":
        run()
        return

    sys.exit(asyncio.run(cli_main(args)))


if __name__ == "__main__":
    run_cli()

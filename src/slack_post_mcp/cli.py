"""Command-line entry point: parse flags, resolve config, serve over stdio."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from slack_post_mcp.config import get_settings, resolve_config
from slack_post_mcp.dispatcher import MessageDispatcher
from slack_post_mcp.errors import ConfigError, ConfigErrorKind
from slack_post_mcp.logging_config import configure_logging
from slack_post_mcp.models.config import ServerConfig
from slack_post_mcp.server import serve

logger = logging.getLogger(__name__)

PROG = "slack-webhook-mcp-server"

EPILOG = """\
Examples:
  # Webhook mode
  slack-webhook-mcp-server --webhook-url "https://hooks.slack.com/services/YOUR/SLACK/WEBHOOK" --channel "#general"

  # Bot mode
  slack-webhook-mcp-server --bot-token "xoxb-..." --channel "CXXXXXXXXXX"
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports malformed arguments as a ConfigError.

    argparse would otherwise exit with status 2 and its own usage dump.
    """

    def error(self, message: str):
        raise ConfigError(
            ConfigErrorKind.INVALID_ARGUMENTS,
            message,
            hint="Use --help for usage information",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="MCP server that posts messages to one Slack channel.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    webhook = parser.add_argument_group("Webhook Mode")
    webhook.add_argument(
        "--webhook-url",
        metavar="<url>",
        help="Slack webhook URL (required for webhook mode)",
    )

    bot = parser.add_argument_group("Bot Mode")
    bot.add_argument(
        "--bot-token",
        metavar="<token>",
        help="Slack bot token (required for bot mode, starts with xoxb-)",
    )

    common = parser.add_argument_group("Common Options")
    common.add_argument("--channel", metavar="<channel>", help="Channel to post to (required)")
    common.add_argument(
        "--username", metavar="<username>", help="Default bot username (optional)"
    )
    common.add_argument(
        "--icon-emoji",
        metavar="<emoji>",
        help="Default bot emoji (optional, e.g. :robot_face:)",
    )
    return parser


def parse_config(argv: Sequence[str] | None = None) -> ServerConfig:
    """Parse ``argv`` and resolve it into a ServerConfig.

    Raises ConfigError on any invalid input. ``--help`` prints usage and
    exits with status 0 before any validation runs.
    """
    args, unknown = build_parser().parse_known_args(argv)
    if unknown:
        logger.warning("Ignoring unrecognized arguments: %s", " ".join(unknown))

    return resolve_config(
        webhook_url=args.webhook_url,
        bot_token=args.bot_token,
        channel=args.channel,
        username=args.username,
        icon_emoji=args.icon_emoji,
    )


def load_config(argv: Sequence[str] | None = None) -> ServerConfig:
    """Resolve the startup config or terminate the process with status 1."""
    try:
        return parse_config(argv)
    except ConfigError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        if exc.hint:
            print(exc.hint, file=sys.stderr)
        raise SystemExit(1) from None


def main(argv: Sequence[str] | None = None) -> None:
    configure_logging(get_settings().log_level)
    config = load_config(argv)
    dispatcher = MessageDispatcher(config)
    asyncio.run(serve(dispatcher))


if __name__ == "__main__":
    main()

"""Message dispatcher: the single ``post_slack_message`` tool.

Validates the tool arguments, picks the delivery strategy for the configured
mode, and folds every outcome into a ToolCallResult. Nothing raised by a
call crosses ``call_tool``; callers always get a well-formed result.
"""

import logging
from collections.abc import Awaitable, Callable

import httpx

from slack_post_mcp.models.config import DeliveryMode, ServerConfig
from slack_post_mcp.models.outcome import PostOutcome
from slack_post_mcp.models.tool import ToolCallResult, ToolDefinition
from slack_post_mcp.slack.bot import post_via_bot
from slack_post_mcp.slack.client import build_http_client
from slack_post_mcp.slack.webhook import post_via_webhook

logger = logging.getLogger(__name__)

TOOL_NAME = "post_slack_message"
MAX_MESSAGE_LENGTH = 4000

MESSAGE_DESCRIPTION = (
    f"The message content to send (max {MAX_MESSAGE_LENGTH} characters). "
    "Supports Slack mrkdwn formatting: *bold*, `code`, ~strikethrough~, "
    "```code blocks```, and >quotes. Note: Use single asterisks (*) for bold, "
    "not double (**) like standard Markdown."
)

Strategy = Callable[[httpx.AsyncClient, ServerConfig, str], Awaitable[PostOutcome]]

_STRATEGIES: dict[DeliveryMode, Strategy] = {
    DeliveryMode.WEBHOOK: post_via_webhook,
    DeliveryMode.BOT: post_via_bot,
}


class MessageDispatcher:
    """Serves ``post_slack_message`` for one immutable ServerConfig.

    Holds no mutable state, so concurrent calls need no coordination.
    ``transport`` replaces the network layer of the outbound HTTP client.
    """

    def __init__(
        self, config: ServerConfig, transport: httpx.AsyncBaseTransport | None = None
    ):
        self._config = config
        self._transport = transport

    @property
    def config(self) -> ServerConfig:
        return self._config

    def tool_definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=TOOL_NAME,
            description=(
                "Post a message to the configured Slack channel only "
                f"({self._config.mode.value} mode)"
            ),
            input_schema={
                "type": "object",
                "properties": {
                    "message": {
                        "type": "string",
                        "description": MESSAGE_DESCRIPTION,
                        "maxLength": MAX_MESSAGE_LENGTH,
                    },
                },
                "required": ["message"],
                "additionalProperties": False,
            },
        )

    def list_tools(self) -> list[ToolDefinition]:
        return [self.tool_definition()]

    async def call_tool(self, name: str, arguments: dict | None) -> ToolCallResult:
        """Handle one tool invocation and return its uniform result."""
        if name != TOOL_NAME:
            return ToolCallResult.error(f"Unknown tool: {name}")

        error = validate_arguments(arguments)
        if error is not None:
            return ToolCallResult.error(error)

        try:
            return await self.post_message(arguments["message"])
        except Exception as exc:
            # Strategies report HTTP failures as outcomes; this covers the rest.
            logger.exception("Unexpected error while posting to Slack")
            return ToolCallResult.error(
                f"Failed to post message to Slack: {exc or type(exc).__name__}"
            )

    async def post_message(self, message: str) -> ToolCallResult:
        """Deliver an already validated message via the configured mode."""
        mode = self._config.mode
        strategy = _STRATEGIES[mode]

        async with build_http_client(self._transport) as client:
            outcome = await strategy(client, self._config, message)

        if outcome.ok:
            logger.info("Posted message to Slack via %s (%d chars)", mode.value, len(message))
            return ToolCallResult.success(
                f"Message posted to Slack successfully via {mode.value}!"
            )

        logger.warning("Slack post via %s failed (%s)", mode.value, outcome.failure.value)
        return ToolCallResult.error(f"Failed to post message to Slack: {outcome.detail}")


def validate_arguments(arguments: dict | None) -> str | None:
    """Check tool arguments against the input contract.

    Returns an error message, or None when the arguments are acceptable.
    """
    if not isinstance(arguments, dict):
        return "Message is required and must be a string"

    unexpected = sorted(set(arguments) - {"message"})
    if unexpected:
        return f"Unexpected arguments: {', '.join(unexpected)}"

    message = arguments.get("message")
    if not message or not isinstance(message, str):
        return "Message is required and must be a string"

    if len(message) > MAX_MESSAGE_LENGTH:
        return f"Message is too long (max {MAX_MESSAGE_LENGTH} characters)"

    return None

"""MCP protocol adapter: exposes the dispatcher over the stdio transport."""

import logging

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from slack_post_mcp.dispatcher import MessageDispatcher
from slack_post_mcp.models.tool import ToolCallResult, ToolDefinition

logger = logging.getLogger(__name__)

SERVER_NAME = "slack-webhook-mcp-server"
SERVER_VERSION = "1.0.0"


def to_mcp_tool(tool: ToolDefinition) -> types.Tool:
    return types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)


def to_mcp_result(result: ToolCallResult) -> types.CallToolResult:
    """Convert a dispatcher result into the protocol's CallToolResult."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=bool(result.is_error),
    )


def create_server(dispatcher: MessageDispatcher) -> Server:
    """Build a low-level MCP server whose only tool is served by ``dispatcher``.

    Input validation is left to the dispatcher so that every rejection comes
    back as the same error-flagged result shape.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [to_mcp_tool(tool) for tool in dispatcher.list_tools()]

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> types.CallToolResult:
        result = await dispatcher.call_tool(name, arguments)
        return to_mcp_result(result)

    return server


async def serve(dispatcher: MessageDispatcher) -> None:
    """Run the server on stdio until the client closes the transport."""
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info(
            "Slack MCP server running on stdio (%s mode)", dispatcher.config.mode.value
        )
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )

"""Tests for ToolCallResult and ToolDefinition wire forms."""

from slack_post_mcp.models.tool import ToolCallResult, ToolDefinition


def test_success_result_has_no_is_error_key():
    result = ToolCallResult.success("done")
    assert result.to_wire() == {"content": [{"type": "text", "text": "done"}]}


def test_error_result_sets_is_error():
    result = ToolCallResult.error("boom")
    assert result.to_wire() == {
        "content": [{"type": "text", "text": "boom"}],
        "isError": True,
    }


def test_tool_definition_accepts_alias_and_field_name():
    """inputSchema (wire name) and input_schema (field name) both populate."""
    by_alias = ToolDefinition(name="t", description="d", inputSchema={"type": "object"})
    by_name = ToolDefinition(name="t", description="d", input_schema={"type": "object"})
    assert by_alias == by_name
    assert by_alias.model_dump(by_alias=True)["inputSchema"] == {"type": "object"}

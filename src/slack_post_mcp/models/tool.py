"""Tool-call protocol shapes: the advertised tool and per-call results."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolDefinition(BaseModel):
    """A tool as reported by a tool listing."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict = Field(alias="inputSchema")


class TextContent(BaseModel):
    """A single text block in a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Uniform result of one tool invocation.

    ``is_error`` stays None on success so the wire form carries no
    ``isError`` key at all.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool | None = Field(default=None, alias="isError")

    @classmethod
    def success(cls, text: str) -> "ToolCallResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, text: str) -> "ToolCallResult":
        return cls(content=[TextContent(text=text)], is_error=True)

    def to_wire(self) -> dict:
        """Dump using protocol field names, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

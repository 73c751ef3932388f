"""The uniform return shape of every tool handler."""
from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class TextBlock:
    text: str
    kind: Literal["text"] = "text"


@dataclass(frozen=True)
class ToolResult:
    content: list[TextBlock] = field(default_factory=list)

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls([TextBlock(text)])

    @property
    def joined_text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_mcp_content(self) -> list:
        """Convert to MCP ``TextContent`` blocks for the transport."""
        from mcp.types import TextContent

        return [TextContent(type="text", text=block.text) for block in self.content]

"""MCP prompt handlers — guided workflows for AI assistants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastmcp.prompts import Message
from pydantic import Field

if TYPE_CHECKING:
    from fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register all prompt handlers on the given MCP server."""

    @mcp.prompt(
        name="create_perchance_list",
        description="Prompt to help create a Perchance list",
        tags={"list", "create"},
    )
    def create_perchance_list(
        topic: Annotated[str, Field(description="The topic for the new list")],
    ) -> list[Message]:
        return [
            Message(
                role="user",
                content=(
                    f"Create a Perchance.org list for {topic}. Kindly include several lists, "
                    "an HTML template using placeholders, and explain the structure."
                ),
            ),
        ]

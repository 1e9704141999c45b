"""MCP resource handlers — read-only data exposed to AI assistants."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastmcp import FastMCP

BASIC_EXAMPLE = """<p>A [creature] that is [size] and loves [food]< /p>

creature
dog|cat|bird

size
small|large|medium

food
pizza|burgers|salad"""

SYNTAX_GUIDE = """# Perchance template syntax

The first line is the template body. It may contain HTML and `[name]`
placeholders.

A bare line (no `|`, no `[`, not starting with `<`) declares a list.
Lines below it hold `|`-separated options:

    creature
    dog|cat|bird

Options may span several lines; blank lines between lists are ignored.
Declaring a list name again replaces its earlier options.

When generating, each list draws one option and every `[name]` with that
name receives it. Placeholders without a matching list stay as written.
"""


def register_resources(mcp: FastMCP) -> None:
    """Register all resource handlers on the given MCP server."""

    @mcp.resource(
        "perchance://examples/basic",
        name="Basic Example",
        description="Basic Perchance example with lists and HTML",
        mime_type="text/plain",
    )
    def basic_example() -> str:
        return BASIC_EXAMPLE

    @mcp.resource(
        "perchance://syntax/guide",
        name="Syntax Guide",
        description="Reference for the list and placeholder syntax understood by the tools.",
        mime_type="text/markdown",
    )
    def syntax_guide() -> str:
        return SYNTAX_GUIDE

"""MCP tool handlers — actions an AI assistant can invoke."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Annotated

from pydantic import Field

if TYPE_CHECKING:
    from fastmcp import FastMCP


def register_tools(mcp: FastMCP) -> None:
    """Register all tool handlers on the given MCP server."""

    # ------------------------------------------------------------------
    # validate_perchance_code
    # ------------------------------------------------------------------
    @mcp.tool(
        name="validate_perchance_code",
        description="Validate the syntax of Perchance code",
        tags={"validate"},
    )
    def validate_perchance_code(
        code: Annotated[str, Field(description="Perchance code to validate")],
    ) -> str:
        from perchance_helper.interpreter import validate

        report = validate(code)
        return json.dumps({"valid": report.valid, "message": report.message})

    # ------------------------------------------------------------------
    # generate_random_output
    # ------------------------------------------------------------------
    @mcp.tool(
        name="generate_random_output",
        description="Generate a random output from Perchance code",
        tags={"generate"},
    )
    def generate_random_output(
        code: Annotated[str, Field(description="Perchance code containing HTML and lists")],
        seed: Annotated[
            int | None, Field(description="Seed for reproducible output (random if omitted)")
        ] = None,
    ) -> str:
        from perchance_helper.interpreter import format_output, generate, make_rng
        from perchance_helper.user_config import get_default_seed, get_output_label

        if seed is None:
            seed = get_default_seed()
        rng = make_rng(seed) if seed is not None else None

        return json.dumps({"text": format_output(generate(code, rng), get_output_label())})

    # ------------------------------------------------------------------
    # parse_perchance_lists
    # ------------------------------------------------------------------
    @mcp.tool(
        name="parse_perchance_lists",
        description=(
            "Show how Perchance code is read: the named option lists, the template body, "
            "and the placeholders it references."
        ),
        tags={"inspect"},
    )
    def parse_perchance_lists(
        code: Annotated[str, Field(description="Perchance code containing HTML and lists")],
    ) -> str:
        from perchance_helper.interpreter import parse_lists

        parsed = parse_lists(code)
        return json.dumps(
            {
                "lists": parsed.lists,
                "body": parsed.body,
                "placeholders": parsed.placeholder_names(),
                "unresolved": parsed.unresolved_placeholders(),
            }
        )

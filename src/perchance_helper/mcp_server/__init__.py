"""MCP server for perchance-helper — exposes the template interpreter via Model Context Protocol."""

import logging

from fastmcp import FastMCP


def create_server() -> FastMCP:
    """Create and configure the FastMCP server instance."""
    mcp = FastMCP(
        name="perchance-helper",
        instructions=(
            "MCP server for authoring Perchance generators: HTML templates with [name] "
            "placeholders filled from named option lists. Use tools to validate templates, "
            "inspect parsed lists, and generate random output."
        ),
    )

    # Import and register tools, resources, prompts
    from perchance_helper.mcp_server.prompts import register_prompts
    from perchance_helper.mcp_server.resources import register_resources
    from perchance_helper.mcp_server.tools import register_tools

    register_tools(mcp)
    register_resources(mcp)
    register_prompts(mcp)

    return mcp


def main() -> None:
    """Entry point for the perchance-helper-mcp command."""
    from perchance_helper.user_config import get_log_level

    # stdout carries the protocol stream; logs go to stderr
    logging.basicConfig(level=get_log_level(), format="%(levelname)s: %(message)s")
    server = create_server()
    server.run()

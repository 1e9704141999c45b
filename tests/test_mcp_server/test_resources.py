"""Tests for MCP server resources."""

import pytest
from fastmcp import Client

from perchance_helper.interpreter import parse_lists


@pytest.mark.asyncio
class TestBasicExampleResource:
    """Tests for the perchance://examples/basic resource."""

    async def test_is_listed(self, mcp_client: Client) -> None:
        resources = await mcp_client.list_resources()
        uris = {str(r.uri) for r in resources}

        assert "perchance://examples/basic" in uris

    async def test_returns_example_text(self, mcp_client: Client) -> None:
        content = await mcp_client.read_resource("perchance://examples/basic")
        text = content[0].text

        assert text.startswith("<p>A [creature] that is [size] and loves [food]")
        assert "dog|cat|bird" in text

    async def test_example_parses_into_three_lists(self, mcp_client: Client) -> None:
        content = await mcp_client.read_resource("perchance://examples/basic")
        parsed = parse_lists(content[0].text)

        assert set(parsed.lists) == {"creature", "size", "food"}
        assert parsed.unresolved_placeholders() == []


@pytest.mark.asyncio
class TestSyntaxGuideResource:
    """Tests for the perchance://syntax/guide resource."""

    async def test_describes_syntax(self, mcp_client: Client) -> None:
        content = await mcp_client.read_resource("perchance://syntax/guide")
        text = content[0].text

        assert "[name]" in text
        assert "|" in text

"""Static resources exposed by the MCP server."""

"""MCP server exposing the Amazon Selling Partner API."""

__version__ = "1.0.0"

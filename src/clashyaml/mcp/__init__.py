"""MCP server exposing the highlighter and validator as tools."""

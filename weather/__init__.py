"""MCP server exposing NWS weather alerts and forecasts over stdio."""

"""MCP surface: tool contracts, resources, prompt templates and dispatch."""

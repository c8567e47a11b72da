"""Infrastructure adapters for mcpbench."""

"""mcpbench domain layer."""

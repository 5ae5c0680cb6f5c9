"""CLI helpers — operator prompts."""

"""Use cases — top-level flows driven by the CLI."""

"""Observability — diagnostic logging setup."""

"""Persistence — the per-run operator log."""

"""Configuration — settings file loading and the directory layout."""

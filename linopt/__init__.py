"""Linux Optimizer — interactive tuning for desktop Linux systems."""

__version__ = "0.1.0"

"""Services — environment probes and the optimization actions."""

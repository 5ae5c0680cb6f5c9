"""UI layer."""

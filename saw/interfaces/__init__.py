"""Public entry points for Saw."""

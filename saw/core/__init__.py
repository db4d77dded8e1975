"""Formatting and effect dispatch for Saw."""

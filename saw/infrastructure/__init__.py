"""Infrastructure helpers shared by the Saw formatters."""

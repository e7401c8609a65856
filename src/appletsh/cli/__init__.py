"""``appletsh`` command-line entry point."""

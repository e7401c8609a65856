"""Internal helpers shared by the dispatcher, the session and the CLI."""

"""Terminal front end: the interactive session and its key bindings."""

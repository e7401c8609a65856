"""Core of the multicall dispatcher: tasks, grammars, registry and config."""

"""Interactive terminal process viewer: search, inspect and kill processes."""

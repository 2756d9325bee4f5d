"""Interactive viewer widgets and IDs."""

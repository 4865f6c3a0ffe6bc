"""Read-only HTTP API over the entity store."""

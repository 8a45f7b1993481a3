"""Read-only HTTP API over generated diffs."""

"""HTTP API for hunk parsing and review preparation."""

"""HTTP API for catalog profiles."""

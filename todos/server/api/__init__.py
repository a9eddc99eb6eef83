"""HTTP API for Todos Server."""

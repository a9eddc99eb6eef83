"""HTTP server for the todos service."""

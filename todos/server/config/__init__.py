"""Configuration for Todos Server."""

"""Interface layer: HTTP API."""

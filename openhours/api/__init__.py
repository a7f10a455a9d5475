"""HTTP API for openhours."""

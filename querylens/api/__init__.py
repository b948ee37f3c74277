"""HTTP API for the query pipeline."""

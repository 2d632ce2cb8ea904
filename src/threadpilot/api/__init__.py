"""HTTP API for the insurance and vehicle services."""

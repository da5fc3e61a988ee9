"""HTTP API for market order allocation."""

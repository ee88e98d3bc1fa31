"""Core services: range fetching, keyword matching and the search pipeline."""

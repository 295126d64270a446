"""Configuration for prdiff."""

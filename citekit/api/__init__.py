"""Citekit API layer."""

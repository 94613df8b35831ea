"""Flattening, persistence and the load pipeline."""

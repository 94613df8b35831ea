"""Streaming loader for MEDLINE citation XML dumps."""

__version__ = "0.1.0"

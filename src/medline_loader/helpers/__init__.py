"""Helper functions for medline_loader."""

"""XML decoding for MEDLINE citation dumps."""

"""Trace ingestion: raw event parsing, begin/end pairing and depth layout."""

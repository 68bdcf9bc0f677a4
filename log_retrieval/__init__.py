"""Chunked retrieval and filtering of daily NDJSON application logs."""

"""Command-line interface for issuewarden."""

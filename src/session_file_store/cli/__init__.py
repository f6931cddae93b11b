"""Command-line interface for session-file-store."""

"""Command-line interface for strseq."""

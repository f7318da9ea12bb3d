"""Entrypoints (inbound adapters) for strseq.

Expose the domain to the outside world through CLI commands. Parse and
validate inputs, call domain operations, and present results.
"""

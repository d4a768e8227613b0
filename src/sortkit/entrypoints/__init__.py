"""Entrypoints (inbound adapters) for SORTKIT.

Expose the library to the outside world. Parse and validate inputs, call the
sorting functions, and present results.
"""

"""Entrypoints (inbound adapters) for UTF8KIT.

Expose the toolkit to the outside world. Parse and validate inputs, call the
engine and text operations, and present results.
"""

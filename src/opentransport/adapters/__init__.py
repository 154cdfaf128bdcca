"""Adapters - configuration, HTTP pipeline and query services."""

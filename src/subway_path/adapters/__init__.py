"""Adapters - configuration, graph backends and the command line."""

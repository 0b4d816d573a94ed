"""subway-path: shortest path and fare calculation over a multi-line transit network."""

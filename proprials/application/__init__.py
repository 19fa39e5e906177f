"""
Application layer package.

Use cases work against domain ports and never import an adapter.
"""

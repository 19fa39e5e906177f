"""
Application layer for the investing bounded context.

One use case per module. Mutating use cases serialize work per
property and per wallet through KeyedLocks.
"""

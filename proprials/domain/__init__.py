"""
Domain layer package.

Entities, ledger events, ports and errors. Standard library only.
"""

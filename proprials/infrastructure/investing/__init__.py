"""
Infrastructure adapters for the investing bounded context.

Each adapter implements a domain port (ABC). The ledger is kept in
process memory; a durable store only needs to implement LedgerRepository.
"""

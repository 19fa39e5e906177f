"""
Investing bounded context: domain layer.

This module contains all domain logic for the investing context:
- Property catalog and share availability
- Wallets and their transaction ledger
- Investments (share purchases)
- User notifications
"""

"""
Proprials: fractional real-estate investment platform.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - investing: Property catalog, share purchases, wallets, notifications.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, per-entity locking.
    - infrastructure: Adapters (in-memory ledger, notifications) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, rate limiting, logging).
"""

"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- security/: Claims token signing and verification (PyJWT)
- role_store/: In-memory membership store with versioned writes
- events/: In-memory event bus and logging event handler
- logging/: structlog console adapter
- enforcement/: Storage rule evaluator (authoritative data-layer adapter)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

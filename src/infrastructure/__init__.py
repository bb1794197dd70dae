"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- content/: In-memory content catalog, access checker, languages, snapshot loading
- logging/: structlog console adapter
- secrets/: Environment secrets adapter
- security/: Execution identity switcher

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

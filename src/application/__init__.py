"""Application layer - Use cases and orchestration.

Read-only use cases following the CQRS query pattern:
- queries/: Query dataclasses and their handlers (resolver, routes feed)
- services/: Reusable building blocks the handlers compose
- dtos/: Results handed to the presentation layer

The application layer orchestrates domain collaborators through their
protocols and never touches infrastructure directly.
"""

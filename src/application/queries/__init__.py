"""Queries (CQRS read side).

Exports:
    ResolvePath: Resolve a frontend path
    GetRoutesPage: Fetch one page of the routes feed
"""

from src.application.queries.routing_queries import GetRoutesPage, ResolvePath

__all__ = [
    "GetRoutesPage",
    "ResolvePath",
]

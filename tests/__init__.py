"""Test suite for the wayfinder service.

Test structure:
- unit/: Unit tests - path normalization, policies, handlers and adapters
  exercised against the in-memory content catalog
- api/: API endpoint tests - resolver and routes feed over HTTP

No database or external services are required.
"""

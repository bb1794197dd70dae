"""API tests package.

End-to-end tests for the frontend endpoints using TestClient.
Tests the complete request/response cycle including:
- Query parameter handling
- JSON:API bodies and error documents
- Cache and security headers
- Shared-secret guard outcomes

Note:
    API tests run the real handlers against the seeded sample catalog
    through FastAPI dependency overrides.
"""

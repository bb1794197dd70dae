"""Presentation layer - HTTP endpoints and HTTP concerns.

The presentation layer is thin: it reads query parameters and headers,
dispatches queries to the application layer and renders results as
JSON:API responses with the right cache headers.

Structure:
- routers/api/frontend/: resolver and routes feed (registry-generated)
- routers/api/middleware/: trace ID, language negotiation, feed secret
- routers/system.py: root and health endpoints
"""

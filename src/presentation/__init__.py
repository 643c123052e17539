"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. It is thin:
endpoints build commands/queries, send them through the Mediator and
translate Results into HTTP responses.

Structure:
- routers/system.py: Non-versioned system endpoints (/, /health, /config)
- routers/api/middleware/: Correlation ID middleware
- routers/api/v1/: API version 1 endpoints (authors, books)

The presentation layer depends on the application layer but contains NO
business logic.
"""

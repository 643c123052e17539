"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- persistence/: In-memory repositories and demo data seeding
- logging/: structlog-based LoggerProtocol adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

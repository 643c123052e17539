"""CQRS Registry - Single Source of Truth for Commands and Queries.

Exports the metadata types, the two registries and their computed views.
The handler container registers every entry at startup.
"""

# Metadata types
from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# Registry constants
from src.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
)

# Computed views and helper functions
from src.application.cqrs.computed_views import (
    get_all_commands,
    get_all_handler_classes,
    get_all_queries,
    get_command_metadata,
    get_commands_by_category,
    get_queries_by_category,
    get_query_metadata,
    get_statistics,
    validate_registry_consistency,
)

__all__ = [
    # Metadata types
    "CommandMetadata",
    "CQRSCategory",
    "QueryMetadata",
    # Registry constants
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    # Helper functions
    "get_all_commands",
    "get_all_handler_classes",
    "get_all_queries",
    "get_command_metadata",
    "get_commands_by_category",
    "get_queries_by_category",
    "get_query_metadata",
    "get_statistics",
    "validate_registry_consistency",
]

"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere. Each type takes its constraints,
OpenAPI description/examples and domain validator from its entry in
VALIDATION_RULES_REGISTRY, so request schemas and the registry cannot drift.

Usage:
    from src.domain.types import AuthorName, Email

    class AuthorCreateRequest(BaseModel):
        name: AuthorName
        email: Email
"""

from typing import Annotated, Any

from pydantic import AfterValidator, Field

from src.domain.validators import VALIDATION_RULES_REGISTRY


def _field(rule_name: str) -> Any:
    """Build the pydantic Field for a registry rule."""
    rule = VALIDATION_RULES_REGISTRY[rule_name]
    return Field(
        **rule.field_constraints,
        description=rule.description,
        examples=rule.examples,
    )


def _validator(rule_name: str) -> AfterValidator:
    return AfterValidator(VALIDATION_RULES_REGISTRY[rule_name].validator_function)


# ============================================================================
# Author Types
# ============================================================================

Email = Annotated[str, _field("email"), _validator("email")]
"""Email address, validated and normalized to lowercase."""

AuthorName = Annotated[str, _field("author_name"), _validator("author_name")]
"""Author name, stripped; blank names are rejected."""

# ============================================================================
# Book Types
# ============================================================================

BookTitle = Annotated[str, _field("book_title"), _validator("book_title")]

BookDescription = Annotated[
    str, _field("book_description"), _validator("book_description")
]

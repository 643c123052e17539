"""Validation Rules Registry.

Single source of truth for all validation rules. The Annotated types in
src/domain/types.py take their Field constraints, description, examples
and validator from these entries.

Every entry's examples must pass its own validator (checked in
tests/unit/test_domain_validators.py).
"""

from dataclasses import dataclass
from typing import Callable

from src.domain.validators.functions import (
    AUTHOR_NAME_MAX_LENGTH,
    BOOK_DESCRIPTION_MAX_LENGTH,
    BOOK_TITLE_MAX_LENGTH,
    validate_description,
    validate_email,
    validate_name,
    validate_title,
)


@dataclass(frozen=True, kw_only=True)
class ValidationRuleMetadata:
    """Metadata for a single validation rule.

    Attributes:
        rule_name: Unique identifier for the rule (e.g., 'email').
        validator_function: Callable that validates input and returns validated value.
        field_constraints: Pydantic Field constraints (min_length, max_length).
        description: Human-readable description of validation requirements.
        examples: Valid example values (also used in OpenAPI).
    """

    rule_name: str
    validator_function: Callable[[str], str]
    field_constraints: dict[str, int]
    description: str
    examples: list[str]


VALIDATION_RULES_REGISTRY: dict[str, ValidationRuleMetadata] = {
    "email": ValidationRuleMetadata(
        rule_name="email",
        validator_function=validate_email,
        field_constraints={"min_length": 5, "max_length": 255},
        description="Author email address, normalized to lowercase",
        examples=["john.doe@example.com", "jane.smith@example.com"],
    ),
    "author_name": ValidationRuleMetadata(
        rule_name="author_name",
        validator_function=validate_name,
        field_constraints={"min_length": 1, "max_length": AUTHOR_NAME_MAX_LENGTH},
        description="Author display name, non-blank",
        examples=["John Doe", "Jane Smith"],
    ),
    "book_title": ValidationRuleMetadata(
        rule_name="book_title",
        validator_function=validate_title,
        field_constraints={"min_length": 1, "max_length": BOOK_TITLE_MAX_LENGTH},
        description="Book title, non-blank",
        examples=["The Great Book", "Another Great Book"],
    ),
    "book_description": ValidationRuleMetadata(
        rule_name="book_description",
        validator_function=validate_description,
        field_constraints={"max_length": BOOK_DESCRIPTION_MAX_LENGTH},
        description="Free-text book description, may be empty",
        examples=["A wonderful book", "Another wonderful book"],
    ),
}


"""Validators package exports.

Exports:
    - Validator functions (from functions.py)
    - Registry components (from registry.py)
"""

from src.domain.validators.functions import (
    validate_description,
    validate_email,
    validate_name,
    validate_title,
)
from src.domain.validators.registry import (
    VALIDATION_RULES_REGISTRY,
    ValidationRuleMetadata,
)

__all__ = [
    # Validator functions
    "validate_description",
    "validate_email",
    "validate_name",
    "validate_title",
    # Registry
    "VALIDATION_RULES_REGISTRY",
    "ValidationRuleMetadata",
]

"""Unit tests for validation functions and the validation rules registry.

Self-enforcing compliance:
- Every Annotated type in src/domain/types.py is built from a registry entry
- Every registry example passes its own validator
"""

from typing import get_args

import pytest
from pydantic import AfterValidator, BaseModel, create_model
from pydantic import ValidationError as PydanticValidationError

from src.domain.types import AuthorName, BookDescription, BookTitle, Email
from src.domain.validators import (
    VALIDATION_RULES_REGISTRY,
    validate_email,
    validate_name,
    validate_title,
)


@pytest.mark.unit
class TestValidationFunctions:
    def test_validate_email_lowercases(self):
        assert validate_email("Jane.Smith@Example.com") == "jane.smith@example.com"

    @pytest.mark.parametrize("value", ["", "plainaddress", "a@", "@example.com"])
    def test_validate_email_rejects_malformed(self, value):
        with pytest.raises(ValueError, match="Invalid email format"):
            validate_email(value)

    def test_validate_name_strips(self):
        assert validate_name("  Jane  ") == "Jane"

    def test_validate_name_rejects_too_long(self):
        with pytest.raises(ValueError, match="cannot exceed 100"):
            validate_name("x" * 101)

    def test_validate_title_rejects_blank(self):
        with pytest.raises(ValueError, match="Title cannot be empty"):
            validate_title("\t ")


@pytest.mark.unit
class TestValidationRulesRegistry:
    def test_registry_covers_all_annotated_types(self):
        assert set(VALIDATION_RULES_REGISTRY) == {
            "email",
            "author_name",
            "book_title",
            "book_description",
        }

    @pytest.mark.parametrize(
        "rule", list(VALIDATION_RULES_REGISTRY.values()), ids=lambda r: r.rule_name
    )
    def test_examples_pass_their_validator(self, rule):
        for example in rule.examples:
            assert rule.validator_function(example)

    def test_rule_names_match_keys(self):
        for key, rule in VALIDATION_RULES_REGISTRY.items():
            assert rule.rule_name == key

    @pytest.mark.parametrize(
        ("annotated_type", "rule_name"),
        [
            (Email, "email"),
            (AuthorName, "author_name"),
            (BookTitle, "book_title"),
            (BookDescription, "book_description"),
        ],
    )
    def test_annotated_types_use_registry_entry(self, annotated_type, rule_name):
        rule = VALIDATION_RULES_REGISTRY[rule_name]
        model = create_model("RulePayload", value=(annotated_type, ...))
        schema = model.model_json_schema()["properties"]["value"]

        assert schema.get("minLength") == rule.field_constraints.get("min_length")
        assert schema["maxLength"] == rule.field_constraints["max_length"]
        assert schema["description"] == rule.description
        assert schema["examples"] == rule.examples

        validators = [
            m for m in get_args(annotated_type)[1:] if isinstance(m, AfterValidator)
        ]
        assert [v.func for v in validators] == [rule.validator_function]


class _AuthorPayload(BaseModel):
    name: AuthorName
    email: Email


class _BookPayload(BaseModel):
    title: BookTitle
    description: BookDescription = ""


@pytest.mark.unit
class TestAnnotatedTypes:
    def test_author_types_normalize(self):
        payload = _AuthorPayload(name=" John ", email="JOHN@example.com")

        assert payload.name == "John"
        assert payload.email == "john@example.com"

    def test_author_types_reject_invalid(self):
        with pytest.raises(PydanticValidationError):
            _AuthorPayload(name="   ", email="john@example.com")
        with pytest.raises(PydanticValidationError):
            _AuthorPayload(name="John", email="not-an-email")

    def test_book_types(self):
        assert _BookPayload(title="T").description == ""
        with pytest.raises(PydanticValidationError):
            _BookPayload(title="")

"""CQRS registry compliance tests.

Self-enforcing checks over COMMAND_REGISTRY and QUERY_REGISTRY:
- Registry is internally consistent (validate_registry_consistency)
- Every command/query class is a Request declaring a Result response
- Computed views agree with the registry
- Metadata validation in __post_init__
"""

import pytest

from src.application.commands.author_commands import CreateAuthor, UpdateAuthor
from src.application.commands.handlers.update_author_handler import (
    UpdateAuthorHandler,
)
from src.application.cqrs import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    CommandMetadata,
    CQRSCategory,
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
from src.application.dtos.author_dtos import AuthorResult
from src.application.mediator import Request, Unit, response_type_of
from src.application.queries.book_queries import ListBooksByAuthor
from src.core.result import Result


@pytest.mark.unit
class TestRegistryConsistency:
    def test_registry_has_no_consistency_errors(self):
        assert validate_registry_consistency() == []

    @pytest.mark.parametrize(
        "request_class",
        [meta.command_class for meta in COMMAND_REGISTRY]
        + [meta.query_class for meta in QUERY_REGISTRY],
        ids=lambda cls: cls.__name__,
    )
    def test_every_request_declares_result_response(self, request_class):
        assert issubclass(request_class, Request)
        response_type = response_type_of(request_class)
        assert response_type.__origin__ is Result

    def test_commands_without_dto_return_unit(self):
        for meta in COMMAND_REGISTRY:
            success_type = response_type_of(meta.command_class).__args__[0]
            if meta.has_result_dto:
                assert success_type is meta.result_dto_class
            else:
                assert success_type is Unit


@pytest.mark.unit
class TestComputedViews:
    def test_statistics(self):
        stats = get_statistics()

        assert stats["total_commands"] == 6
        assert stats["total_queries"] == 5
        assert stats["total_operations"] == 11
        assert stats["commands_by_category"] == {"authors": 3, "books": 3}
        assert stats["queries_by_category"] == {"authors": 2, "books": 3}
        assert stats["commands_with_result_dto"] == 2
        assert stats["list_queries"] == 3

    def test_lookup_views(self):
        assert CreateAuthor in get_all_commands()
        assert ListBooksByAuthor in get_all_queries()
        assert get_command_metadata(CreateAuthor).result_dto_class is AuthorResult
        assert get_query_metadata(ListBooksByAuthor).returns_list is True
        assert get_command_metadata(ListBooksByAuthor) is None
        assert get_query_metadata(CreateAuthor) is None

    def test_category_views(self):
        assert len(get_commands_by_category(CQRSCategory.AUTHORS)) == 3
        assert len(get_queries_by_category(CQRSCategory.BOOKS)) == 3

    def test_handler_classes_unique(self):
        handlers = get_all_handler_classes()

        assert len(handlers) == 11
        assert len(set(handlers)) == 11


@pytest.mark.unit
class TestMetadataValidation:
    def test_result_dto_flag_requires_class(self):
        with pytest.raises(ValueError, match="no result_dto_class"):
            CommandMetadata(
                command_class=UpdateAuthor,
                handler_class=UpdateAuthorHandler,
                category=CQRSCategory.AUTHORS,
                has_result_dto=True,
            )

    def test_result_dto_class_requires_flag(self):
        with pytest.raises(ValueError, match="has_result_dto=False"):
            CommandMetadata(
                command_class=UpdateAuthor,
                handler_class=UpdateAuthorHandler,
                category=CQRSCategory.AUTHORS,
                result_dto_class=AuthorResult,
            )

"""Compliance tests for the CQRS registry.

Verifies every registered request has a handler with ``handle`` and that the
handler's dependencies can be wired by the container.
"""

import pytest

from streetcode.application.cqrs import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    CQRSCategory,
    get_all_commands,
    get_all_handler_classes,
    get_all_queries,
    get_commands_by_category,
    get_handler_class,
    get_metadata,
    get_queries_by_category,
    get_statistics,
    validate_registry_consistency,
)
from streetcode.application.commands.fact_commands import ReorderFacts
from streetcode.application.commands.handlers.reorder_facts_handler import (
    ReorderFactsHandler,
)
from streetcode.application.queries.art_queries import GetArtById
from streetcode.application.queries.handlers.get_art_by_id_handler import (
    GetArtByIdHandler,
)
from streetcode.core.container.handler_factory import (
    SESSION_TYPES,
    SINGLETON_TYPES,
    analyze_handler_dependencies,
)


def test_registry_is_consistent():
    assert validate_registry_consistency() == []


def test_handler_lookup_by_request_class():
    assert get_handler_class(ReorderFacts) is ReorderFactsHandler
    assert get_handler_class(GetArtById) is GetArtByIdHandler
    assert get_handler_class(object) is None


def test_statistics_match_registry():
    stats = get_statistics()

    assert stats["total_commands"] == len(COMMAND_REGISTRY) == len(get_all_commands())
    assert stats["total_queries"] == len(QUERY_REGISTRY) == len(get_all_queries())
    assert len(get_all_handler_classes()) == stats["total_operations"]


def test_all_commands_are_fact_commands():
    assert len(get_commands_by_category(CQRSCategory.FACT)) == len(COMMAND_REGISTRY)


def test_queries_split_between_media_and_facts():
    media = {meta.query_class.__name__ for meta in get_queries_by_category(CQRSCategory.MEDIA)}
    facts = {meta.query_class.__name__ for meta in get_queries_by_category(CQRSCategory.FACT)}

    assert media == {"GetArtById", "ListArts", "ListArtsByStreetcode", "GetImageById"}
    assert facts == {"GetFactById", "ListFactsByStreetcode"}
    assert len(media) + len(facts) == len(QUERY_REGISTRY)


@pytest.mark.parametrize("handler_class", get_all_handler_classes(), ids=lambda c: c.__name__)
def test_handler_dependencies_are_resolvable(handler_class):
    """Every constructor parameter maps to a known container type."""
    dependencies = analyze_handler_dependencies(handler_class)

    assert dependencies
    for info in dependencies.values():
        assert info["type_name"] in SESSION_TYPES | set(SINGLETON_TYPES)


def test_metadata_lookup_and_serialized_commands():
    meta = get_metadata(ReorderFacts)

    assert meta is not None
    assert meta.serialized_per_streetcode
    assert get_metadata(object) is None
    assert get_statistics()["serialized_commands"] == len(COMMAND_REGISTRY)

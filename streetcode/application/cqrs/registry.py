"""CQRS Registry - Single Source of Truth for Commands and Queries.

Catalogs every command and query with its handler. Used for:
- Mediator dispatch (request type -> handler class)
- Validation tests (verify no drift between requests/handlers)

Adding new commands/queries:
1. Define command/query dataclass in the matching *_commands.py/*_queries.py
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing
"""

from streetcode.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# ═══════════════════════════════════════════════════════════════════════════
# Commands and handlers
# ═══════════════════════════════════════════════════════════════════════════
from streetcode.application.commands.fact_commands import (
    CreateFact,
    DeleteFact,
    ReorderFacts,
)
from streetcode.application.commands.handlers.create_fact_handler import (
    CreateFactHandler,
)
from streetcode.application.commands.handlers.delete_fact_handler import (
    DeleteFactHandler,
)
from streetcode.application.commands.handlers.reorder_facts_handler import (
    ReorderFactsHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Queries and handlers
# ═══════════════════════════════════════════════════════════════════════════
from streetcode.application.queries.art_queries import (
    GetArtById,
    ListArts,
    ListArtsByStreetcode,
)
from streetcode.application.queries.fact_queries import (
    GetFactById,
    ListFactsByStreetcode,
)
from streetcode.application.queries.image_queries import GetImageById
from streetcode.application.queries.handlers.get_art_by_id_handler import (
    GetArtByIdHandler,
)
from streetcode.application.queries.handlers.get_fact_by_id_handler import (
    GetFactByIdHandler,
)
from streetcode.application.queries.handlers.get_image_by_id_handler import (
    GetImageByIdHandler,
)
from streetcode.application.queries.handlers.list_arts_handler import (
    ListArtsByStreetcodeHandler,
    ListArtsHandler,
)
from streetcode.application.queries.handlers.list_facts_by_streetcode_handler import (
    ListFactsByStreetcodeHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# DTOs
# ═══════════════════════════════════════════════════════════════════════════
from streetcode.application.dtos import (
    ArtDto,
    FactDto,
    ImageDto,
    ReorderFactsResult,
)


# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY (3 commands)
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=ReorderFacts,
        handler_class=ReorderFactsHandler,
        category=CQRSCategory.FACT,
        has_result_dto=True,
        result_dto_class=ReorderFactsResult,
        description="Renumber all facts of a streetcode in the given order",
    ),
    CommandMetadata(
        command_class=CreateFact,
        handler_class=CreateFactHandler,
        category=CQRSCategory.FACT,
        has_result_dto=True,
        result_dto_class=FactDto,
        description="Append a fact to the end of a streetcode",
    ),
    CommandMetadata(
        command_class=DeleteFact,
        handler_class=DeleteFactHandler,
        category=CQRSCategory.FACT,
        has_result_dto=False,  # Returns deleted fact id
        description="Delete a fact and close the gap in numbering",
    ),
]


# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY (6 queries)
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    # Media
    QueryMetadata(
        query_class=GetArtById,
        handler_class=GetArtByIdHandler,
        category=CQRSCategory.MEDIA,
        result_dto_class=ArtDto,
        description="Get a single art with its image",
    ),
    QueryMetadata(
        query_class=ListArts,
        handler_class=ListArtsHandler,
        category=CQRSCategory.MEDIA,
        result_dto_class=ArtDto,
        returns_list=True,
        description="List every art (fails when there are none)",
    ),
    QueryMetadata(
        query_class=ListArtsByStreetcode,
        handler_class=ListArtsByStreetcodeHandler,
        category=CQRSCategory.MEDIA,
        result_dto_class=ArtDto,
        returns_list=True,
        description="List the arts of a streetcode in gallery order",
    ),
    QueryMetadata(
        query_class=GetImageById,
        handler_class=GetImageByIdHandler,
        category=CQRSCategory.MEDIA,
        result_dto_class=ImageDto,
        description="Get image metadata",
    ),
    # Facts
    QueryMetadata(
        query_class=GetFactById,
        handler_class=GetFactByIdHandler,
        category=CQRSCategory.FACT,
        result_dto_class=FactDto,
        description="Get a single fact",
    ),
    QueryMetadata(
        query_class=ListFactsByStreetcode,
        handler_class=ListFactsByStreetcodeHandler,
        category=CQRSCategory.FACT,
        result_dto_class=FactDto,
        returns_list=True,
        description="List the facts of a streetcode ordered by number",
    ),
]

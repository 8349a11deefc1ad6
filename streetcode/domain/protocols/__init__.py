"""Domain protocols (ports).

Infrastructure provides the implementations; handlers depend only on these.
"""

from streetcode.domain.protocols.art_repository import ArtRepository
from streetcode.domain.protocols.fact_repository import FactRepository
from streetcode.domain.protocols.logger_protocol import LoggerProtocol
from streetcode.domain.protocols.mapper_protocol import MapperProtocol
from streetcode.domain.protocols.repository import Repository
from streetcode.domain.protocols.repository_wrapper import RepositoryWrapper

__all__ = [
    "ArtRepository",
    "FactRepository",
    "LoggerProtocol",
    "MapperProtocol",
    "Repository",
    "RepositoryWrapper",
]

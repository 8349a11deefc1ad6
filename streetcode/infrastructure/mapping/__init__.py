"""Entity to DTO mapping (implements MapperProtocol)."""

from streetcode.infrastructure.mapping.dto_mapper import DtoMapper

__all__ = ["DtoMapper"]

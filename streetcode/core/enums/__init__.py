"""Core enums shared across layers."""

from streetcode.core.enums.environment import Environment
from streetcode.core.enums.error_code import ErrorCode

__all__ = [
    "Environment",
    "ErrorCode",
]

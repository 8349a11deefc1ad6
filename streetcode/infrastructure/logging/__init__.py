"""Logging adapters implementing LoggerProtocol."""

from streetcode.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]

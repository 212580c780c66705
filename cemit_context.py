"""
Emission context for cross-cutting options.

This module defines the EmitContext dataclass which holds the options shared
by the command-line driver and its logging helpers.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Hierarchical logging levels for cemit tools."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages (default)
    INFO = 10       # General progress messages (-v)
    DEBUG = 30      # Detailed diagnostic information (-vvv)


@dataclass
class EmitContext:
    """
    Holds cross-cutting options for cemit tools.

    Attributes:
        log_rich_format:    If True, emit logs in rich format: timestamp and log level.
        log_level:          Current logging level.
    """
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'EmitContext':
        """Create an EmitContext with default settings."""
        return EmitContext(log_level=LogLevel.WARNING)

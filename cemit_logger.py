"""
Logging utilities for the cemitc driver.

Messages go to stderr so that generated C on stdout stays clean.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import sys
import time
from typing import Optional

from cemit_context import EmitContext, LogLevel

_LEVEL_TAGS = {
    LogLevel.ERROR: "ERROR",
    LogLevel.WARNING: "WARNING",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
}


def _prefix(context: EmitContext, log_level: LogLevel) -> str:
    if not context.log_rich_format:
        return ""
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    return f"{timestamp} [{_LEVEL_TAGS[log_level]}] "


def log(context: EmitContext, log_level: LogLevel, message: str) -> None:
    """
    Write `message` to stderr if the context's level admits it.

    Args:
        context:    The emission context holding level and format flags.
        log_level:  The level of the message.
        message:    The message to log.
    """
    if context.log_level >= log_level:
        print(f"{_prefix(context, log_level)}{message}", file=sys.stderr)


def log_error(context: EmitContext, message: str) -> None:
    log(context, LogLevel.ERROR, message)


def log_info(context: EmitContext, message: str) -> None:
    log(context, LogLevel.INFO, message)


def log_debug(context: EmitContext, message: str) -> None:
    log(context, LogLevel.DEBUG, message)


def log_stage(context: EmitContext, stage: str, subject: Optional[str] = None) -> None:
    """Log the start of a driver stage, e.g. "Building 'hello_world'"."""
    if subject:
        log_info(context, f"{stage} '{subject}'")
    else:
        log_info(context, f"{stage}...")


def log_timing(context: EmitContext, label: str, elapsed: float, rounds: int = 1) -> None:
    """Log total and per-round wall time at DEBUG level."""
    per_round_us = elapsed / rounds * 1e6
    log_debug(context, f"{label}: {elapsed:.6f}s total, {per_round_us:.3f} us/round over {rounds} round(s)")

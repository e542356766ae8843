"""
Opt-in hot path profiling.

Set ``JSONTREE_PROFILE`` in the environment to collect call counts and
timings for the tokenizer, sub-parsers and serializer. When it is unset,
``profile()`` hands back a shared no-op context manager.
"""

from __future__ import annotations

import os
import time
from contextlib import AbstractContextManager
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "JSONTREE_PROFILE" in os.environ

_STATS: dict[str, HotPathStats] = {}
_DISABLED = nullcontext()


@dataclass
class HotPathStats:
    """Accumulated timings for one named hot path."""

    name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, elapsed_ns: int, chars: int = 0) -> None:
        """Adds one timed call covering ``chars`` characters."""
        self.call_count += 1
        self.total_time_ns += elapsed_ns
        self.chars_processed += chars

    @property
    def mean_time_ns(self) -> float:
        if not self.call_count:
            return 0.0
        return self.total_time_ns / self.call_count


class _Timer:
    def __init__(self, name: str, chars: int) -> None:
        self.name = name
        self.chars = chars
        self.started = 0

    def __enter__(self) -> _Timer:
        self.started = time.perf_counter_ns()
        return self

    def __exit__(self, *exc_info: object) -> None:
        elapsed = time.perf_counter_ns() - self.started
        stats = _STATS.setdefault(self.name, HotPathStats(self.name))
        stats.record_call(elapsed, self.chars)


def profile(name: str, chars: int = 0) -> AbstractContextManager[Any]:
    """Times the enclosed block under ``name`` when profiling is on."""
    if not PROFILE_HOT_PATHS:
        return _DISABLED
    return _Timer(name, chars)


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the collected statistics by hot path name."""
    return _STATS.copy()


def clear_hot_path_stats() -> None:
    """Forgets all collected statistics."""
    _STATS.clear()

"""
Module: qna_layout.text.cache

Purpose:
    Measurement caching for repeated layouts.
    Wraps a native measurer with a bounded LRU memo keyed by
    (text, font descriptor). Owned by the caller so the layout
    functions stay free of hidden state.

Key Classes:
    - MeasurementCache: LRU cache in front of a TextMeasurer

Dependencies:
    - collections (std)

Used By:
    - Integration layers that re-run layout on every edit
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import TYPE_CHECKING, Tuple

from .metrics import NativeMetrics, TextMeasurer

if TYPE_CHECKING:
    from qna_layout.config import Style

logger = logging.getLogger(__name__)


class MeasurementCache:
    """
    LRU cache for native text measurements.

    Callable with the same signature as the measurer it wraps, so it can
    be passed anywhere a TextMeasurer is accepted.

    Attributes:
        max_entries: Maximum number of cached measurements.

    Example:
        >>> cache = MeasurementCache(PillowMeasurer(), max_entries=1024)
        >>> result = layout("Name?", "Max", q_style, a_style, 300, 80, measurer=cache)
    """

    def __init__(self, measurer: TextMeasurer, max_entries: int = 2048):
        """
        Initialize cache.

        Args:
            measurer: Measurer whose results are cached.
            max_entries: Entries kept before the least recently used is evicted.
        """
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive: {max_entries}")
        self._measurer = measurer
        self._max_entries = max_entries
        self._cache: "OrderedDict[Tuple[str, str], NativeMetrics]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def __len__(self) -> int:
        return len(self._cache)

    def __call__(self, text: str, font_descriptor: str, style: "Style") -> NativeMetrics:
        key = (text, font_descriptor)

        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                # Move to end (most recently used)
                self._cache.move_to_end(key)
                self.hits += 1
                return cached

        metrics = self._measurer(text, font_descriptor, style)

        with self._lock:
            self.misses += 1
            self._cache[key] = metrics
            self._cache.move_to_end(key)
            if len(self._cache) > self._max_entries:
                oldest, _ = self._cache.popitem(last=False)
                logger.debug(f"Cache EVICT: {oldest[0][:20]!r} ({oldest[1]})")
        return metrics

    def clear(self) -> None:
        """Drop all cached measurements and reset counters."""
        with self._lock:
            self._cache.clear()
            self.hits = 0
            self.misses = 0

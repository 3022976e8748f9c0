"""
Opt-in hot path profiling for the parser and serializer.

Enabled by setting LJSON_PROFILE in the environment (and running without
-O). Each profiled section records its wall time and how many characters it
covered: parser sections sample the cursor index on entry and exit, writer
sections add the length of the text they produced. When disabled,
ProfileContext is a no-op with no bookkeeping.

The flag is read at import time; callers reach ProfileContext through this
module so a reload picks up a changed environment.
"""

import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "LJSON_PROFILE" in os.environ

type CharCounter = Callable[[], int]


@dataclass
class HotPathStats:
    """Accumulated timing and character counts for one profiled section."""

    section: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars

    @property
    def ns_per_char(self) -> float:
        """Mean cost per character, 0.0 before any character was counted."""
        if not self.chars_processed:
            return 0.0
        return self.total_time_ns / self.chars_processed


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """
        Times one section and counts the characters it covered.

        With a counter, the count is the counter's growth between entry and
        exit; nested sections therefore include their children. Without
        one, add_chars supplies the count.
        """

        def __init__(
            self, section: str, counter: CharCounter | None = None
        ) -> None:
            self.section = section
            self.counter = counter
            self.chars = 0
            self._start_ns = 0
            self._start_count = 0

        def __enter__(self) -> "ProfileContext":
            if self.counter is not None:
                self._start_count = self.counter()
            self._start_ns = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self._start_ns
            if self.counter is not None:
                self.chars += self.counter() - self._start_count
            stats = _hot_path_stats.get(self.section)
            if stats is None:
                stats = _hot_path_stats[self.section] = HotPathStats(
                    self.section
                )
            stats.record_call(duration, self.chars)

        def add_chars(self, count: int) -> None:
            self.chars += count

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns a snapshot of the statistics keyed by section name."""
        return dict(_hot_path_stats)

    def clear_hot_path_stats() -> None:
        _hot_path_stats.clear()

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(
            self, section: str, counter: CharCounter | None = None
        ) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

        def add_chars(self, count: int) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass

from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display service with tqdm (TTY only).

Shows row classification progress. In non-TTY environments (CI, pipes) the
bar is disabled so the labeled log output stays clean.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Check if stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class ProgressTracker:
    """Progress tracker using tqdm for row processing.

    Usable as a context manager; the bar is closed on exit.
    """

    def __init__(self, total: int, *, description: str = "Processing rows", enabled: bool = True) -> None:
        """Initialize progress tracker.

        Args:
            total: Total number of rows to process
            description: Description for the progress bar
            enabled: Caller-side switch; the bar is shown only if this and TTY are both true
        """
        self.total = total
        self.description = description
        self.current = 0

        self.enabled = enabled and is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total,
                desc=description,
                unit="row",
                leave=False,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def advance(self, count: int = 1) -> None:
        self.current += count
        if self.enabled and self.pbar is not None:
            self.pbar.update(count)

    def close(self) -> None:
        """Close the progress bar."""
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

from __future__ import annotations

from typing import Callable

from resource_builder.utils.logging_utils import get_logger

logger = get_logger(__name__)


class CompletionDetector:
    """
    Tracks processed vs expected files and fires ``on_complete`` once.

    Only the coordinating thread calls into this object; workers report
    through futures, so the compare-and-finalize step is never interleaved.
    """

    def __init__(self, expected_count: int, on_complete: Callable[[], None]):
        if expected_count < 0:
            raise ValueError("expected_count must be non-negative")
        self.expected_count = expected_count
        self.processed_count = 0
        self._on_complete = on_complete
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def remaining(self) -> int:
        return self.expected_count - self.processed_count

    def discount(self) -> None:
        """Drop one skipped candidate from the expected total."""
        if self.expected_count <= self.processed_count:
            logger.warning(
                "Ignoring discount: expected=%d already reached by processed=%d",
                self.expected_count,
                self.processed_count,
            )
            return
        self.expected_count -= 1

    def on_file_handled(self, counted: bool) -> bool:
        """Record one handled file; returns True if this call finalized the run."""
        if counted:
            if self.processed_count >= self.expected_count:
                logger.warning(
                    "Processed count already at expected=%d; ignoring extra completion",
                    self.expected_count,
                )
            else:
                self.processed_count += 1

        if self._finalized or self.processed_count < self.expected_count:
            return False

        self._finalized = True
        self._on_complete()
        return True

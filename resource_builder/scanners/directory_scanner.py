from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from resource_builder.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Checked in this order; the first token that matches decides eligibility.
VALID_EXTENSIONS: Tuple[str, ...] = (
    "vyint",
    "vyi",
    "vym",
    "vymac",
    "mp3",
    "aac",
    "wav",
    "m4a",
    "ogg",
    "flac",
)


@dataclass
class ScanError:
    path: str
    error: str


@dataclass
class ScanResult:
    candidates: List[Path] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)

    @property
    def expected_count(self) -> int:
        return len(self.candidates)


def file_extension(path: Path) -> str:
    """Extension without the leading dot; dotfiles such as ``.vyi`` have none."""
    return path.suffix[1:]


class DirectoryScanner:
    """
    Recursively walks an input root and collects files whose extension is
    on the whitelist.

    match_mode:
    - "exact": the extension must equal a whitelist token
    - "contains": the extension only has to contain a token (legacy rule,
      also accepts e.g. ``mp3x``)
    """

    def __init__(
        self,
        match_mode: str = "exact",
        extensions: Tuple[str, ...] = VALID_EXTENSIONS,
    ):
        if match_mode not in ("exact", "contains"):
            raise ValueError(f"unknown match mode: {match_mode}")
        self.match_mode = match_mode
        self.extensions = extensions

    def matching_token(self, extension: str) -> Optional[str]:
        if not extension:
            return None
        for token in self.extensions:
            if self.match_mode == "exact":
                if extension == token:
                    return token
            elif token in extension:
                return token
        return None

    def scan(self, root: Path) -> ScanResult:
        result = ScanResult()
        self._scan_directory(Path(root), result)
        logger.info("Scan of %s found %d candidate(s)", root, result.expected_count)
        return result

    def _scan_directory(self, directory: Path, result: ScanResult) -> None:
        try:
            entries = sorted(directory.iterdir())
        except OSError as exc:
            logger.error("[Error] processing directory %s: %s", directory, exc)
            result.errors.append(ScanError(path=str(directory), error=str(exc)))
            return

        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError as exc:
                logger.error("[Error] reading %s: %s", entry, exc)
                result.errors.append(ScanError(path=str(entry), error=str(exc)))
                continue

            if is_dir:
                self._scan_directory(entry, result)
            elif self.matching_token(file_extension(entry)) is not None:
                result.candidates.append(entry)

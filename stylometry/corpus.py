"""Corpus loading: one UTF-8 text file, read whole and lower-cased."""

import hashlib
from dataclasses import dataclass
from pathlib import Path

from .errors import DegenerateInputError
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CorpusSnapshot:
    """Immutable lower-cased corpus text for one analysis run."""
    text: str
    source: str = "<direct_input>"

    @property
    def content_hash(self) -> str:
        """SHA-256 of the text, for matching reports to inputs."""
        return hashlib.sha256(self.text.encode("utf-8")).hexdigest()

    @classmethod
    def from_text(cls, text: str, source: str = "<direct_input>") -> "CorpusSnapshot":
        """Snapshot raw text, lower-casing it.

        Raises:
            DegenerateInputError: If the text is empty or whitespace.
        """
        if not text or not text.strip():
            raise DegenerateInputError(f"Empty corpus: {source}")
        return cls(text=text.lower(), source=source)


def load_corpus(file_path: str) -> CorpusSnapshot:
    """Read a corpus file in full.

    Args:
        file_path: Path to a UTF-8 text file.

    Returns:
        CorpusSnapshot of the lower-cased content.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        UnicodeDecodeError: If the file is not valid UTF-8.
        DegenerateInputError: If the file is empty.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus file not found: {file_path}")

    snapshot = CorpusSnapshot.from_text(path.read_text(encoding="utf-8"), source=path.name)
    logger.info(
        f"Loaded corpus {path.name}",
        extra_data={"chars": len(snapshot.text), "sha256": snapshot.content_hash[:12]}
    )
    return snapshot

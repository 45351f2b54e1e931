"""Loading of the practice word list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "words.txt"


def load_corpus(path: Optional[Path] = None) -> Tuple[str, ...]:
    """Read a whitespace separated word list, keeping file order."""
    corpus_path = path or DEFAULT_CORPUS_PATH
    if not corpus_path.exists():
        raise FileNotFoundError(f"Word list not found: {corpus_path}")
    words = tuple(corpus_path.read_text(encoding="utf-8").split())
    if not words:
        raise ValueError(f"{corpus_path.name}: word list is empty")
    logger.info("Loaded %d words from %s", len(words), corpus_path)
    return words

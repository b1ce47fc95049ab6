"""
Corpus token source: whitespace-delimited words from text or files
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from .exceptions import ResourceError

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens."""

    return text.split()


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield the tokens of a line stream in order, treating it as one text."""

    for line in lines:
        yield from line.split()


def read_tokens(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """Read every whitespace-delimited token from a corpus file.

    Raises ResourceError if the file is missing, unreadable, or cannot be
    decoded with ``encoding``.
    """

    corpus_path = Path(path)
    try:
        with open(corpus_path, "r", encoding=encoding) as f:
            tokens = list(iter_tokens(f))
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise ResourceError(f"Cannot read corpus {corpus_path}: {exc}") from exc

    logger.info(f"Read {len(tokens)} tokens from corpus {corpus_path}")
    return tokens

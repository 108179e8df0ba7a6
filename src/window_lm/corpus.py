"""Corpus reading for the window language model.

The model only ever sees the single string these helpers return, so a corpus
can come from a text file, an open stream, or a CSV column.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import pandas as pd
import regex  # type: ignore


logger = logging.getLogger(__name__)

_CONTROL_RE = regex.compile(r"(?![\n\t])\p{Cc}")
_MARK_RE = regex.compile(r"\p{Mn}+")
_HSPACE_RE = regex.compile(r"[^\S\n]+")


@dataclass(frozen=True)
class CorpusConfig:
    # All off: windows are matched on the exact characters of the file.
    lowercase: bool = False
    strip_accents: bool = False
    strip_control: bool = False
    collapse_whitespace: bool = False


def read_corpus(source: str | Path | TextIO, encoding: str = "utf-8") -> str:
    """Return the entire corpus as one string.

    `source` is a file path or anything with a `read()` method. Line endings
    are kept as they appear in the file.
    """

    if hasattr(source, "read"):
        text = source.read()
    else:
        with open(source, "r", encoding=encoding, newline="") as f:
            text = f.read()

    logger.info("Read corpus of %d characters", len(text))
    return text


def load_corpus_csv(path: str | Path, column: str = "text", separator: str = "\n") -> str:
    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(f"CSV must have a column named {column!r}")
    rows = df[column].dropna().astype(str).tolist()
    return separator.join(rows)


def normalize_corpus(text: str, config: CorpusConfig | None = None) -> str:
    cfg = config or CorpusConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        s = _MARK_RE.sub("", unicodedata.normalize("NFKD", s))

    if cfg.strip_control:
        s = _CONTROL_RE.sub("", s)

    if cfg.collapse_whitespace:
        s = _HSPACE_RE.sub(" ", s)

    return s

"""Loading knowledge entries from corpus files.

A corpus file is JSON or YAML with an ``entries`` list (a bare top-level
list is accepted too). Each item uses the KnowledgeEntry.to_dict layout.
"""

import json
from pathlib import Path
from typing import Any, List

import yaml

from ..models.entry import KnowledgeEntry
from ..utils.logger import get_logger

logger = get_logger(__name__)


class CorpusError(Exception):
    """A corpus file could not be read or parsed."""


def _read_document(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def load_corpus(path: str) -> List[KnowledgeEntry]:
    """
    Load knowledge entries from a JSON or YAML file.

    Args:
        path: Path to the corpus file

    Returns:
        Entries in file order

    Raises:
        CorpusError: If the file is missing, malformed, or has invalid entries
    """
    corpus_path = Path(path)
    if not corpus_path.exists():
        raise CorpusError(f"Corpus file not found: {corpus_path}")

    try:
        data = _read_document(corpus_path)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CorpusError(f"Failed to read corpus {corpus_path}: {e}") from e

    if isinstance(data, dict):
        items = data.get("entries", [])
    elif isinstance(data, list):
        items = data
    elif data is None:
        items = []
    else:
        raise CorpusError(f"Corpus {corpus_path} must contain a list of entries")

    entries = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise CorpusError(f"Corpus {corpus_path} entry #{position} is not a mapping")
        try:
            entries.append(KnowledgeEntry.from_dict(item))
        except (TypeError, ValueError) as e:
            raise CorpusError(f"Corpus {corpus_path} entry #{position} is invalid: {e}") from e

    logger.info(f"Loaded {len(entries)} knowledge entries from {corpus_path}")
    return entries

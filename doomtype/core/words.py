from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

from doomtype.core.errors import PromptError
from doomtype.core.settings import DEFAULT_WORD_COUNT

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).resolve().parent.parent / "data" / "words.yaml"


class WordRepository:
    """Word list loaded from a YAML file with a top-level ``words`` list."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or DEFAULT_WORDS_PATH
        self._words = self._load_words()

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> List[str]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def _load_words(self) -> List[str]:
        if not self._path.exists():
            raise PromptError(f"Word list not found: {self._path}")
        try:
            raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as e:
            raise PromptError(f"{self._path.name}: could not read word list: {e}") from e
        if not raw or not isinstance(raw, dict):
            raise PromptError(f"{self._path.name}: expected YAML with a 'words' list")
        content = raw.get("words")
        if isinstance(content, list):
            words = [str(item).strip().lower() for item in content if str(item).strip()]
        elif isinstance(content, str):
            # allow words as a whitespace separated block
            words = [word.lower() for word in content.split()]
        else:
            raise PromptError(f"{self._path.name}: missing or invalid 'words'")
        # prompts are space-joined, so a word must not contain spaces itself
        words = [word for word in words if " " not in word]
        if not words:
            raise PromptError(f"{self._path.name}: 'words' has no entries")
        logger.debug("Loaded %d words from %s", len(words), self._path)
        return words

    def generate_prompt(self, word_count: int = DEFAULT_WORD_COUNT, rng: Optional[random.Random] = None) -> str:
        return generate_prompt(word_count, rng=rng, words=self._words)


def generate_prompt(
    word_count: int = DEFAULT_WORD_COUNT,
    *,
    rng: Optional[random.Random] = None,
    words: Optional[Sequence[str]] = None,
) -> str:
    """Return *word_count* random lowercase words joined by single spaces."""
    if isinstance(word_count, bool) or not isinstance(word_count, int) or word_count <= 0:
        raise ValueError(f"word_count must be a positive integer, got {word_count!r}")
    if words is None:
        words = WordRepository().all()
    if not words:
        raise PromptError("Cannot build a prompt from an empty word list")
    chooser = rng or random
    return " ".join(chooser.choice(words).lower() for _ in range(word_count))

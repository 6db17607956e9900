from __future__ import annotations

import re
from typing import FrozenSet, NamedTuple, Tuple


_WS_RE = re.compile(r"\s+")


class Word(NamedTuple):
	text: str
	chars: FrozenSet[str]


WordSet = Tuple[Word, ...]


def normalize_title(text: str) -> str:
	text = text.lower()
	text = _WS_RE.sub(" ", text)
	return text.strip()


def char_set(word: str) -> FrozenSet[str]:
	return frozenset(word)


def tokenize(text: str, case_sensitive: bool = False) -> WordSet:
	"""Split on whitespace and attach each word's character set."""
	if not case_sensitive:
		text = text.lower()
	return tuple(Word(t, char_set(t)) for t in text.split())

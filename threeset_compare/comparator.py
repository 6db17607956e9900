from __future__ import annotations

from functools import lru_cache
from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .config import AppSettings, get_settings
from .utils.text import Word, WordSet, tokenize


class Comparator(BaseModel):
	model_config = ConfigDict(frozen=True)

	minimum_word_len: int = Field(default=2, ge=1)
	delta_word_len_ignore: int = Field(default=3, ge=0)
	min_word_similarity: float = Field(default=0.707, ge=0.0, le=1.0)
	max_length: int = Field(default=255, ge=1)
	case_sensitive: bool = False

	@classmethod
	def from_settings(cls, settings: Optional[AppSettings] = None) -> "Comparator":
		settings = settings or get_settings()
		return cls(
			minimum_word_len=settings.minimum_word_len,
			delta_word_len_ignore=settings.delta_word_len_ignore,
			min_word_similarity=settings.min_word_similarity,
			max_length=settings.max_length,
			case_sensitive=settings.case_sensitive,
		)

	def word_similarity(self, first: Word, second: Word) -> float:
		"""Score a single word pair in [0, 1]."""
		if first.text in second.text or second.text in first.text:
			delta_len = abs(len(first.text) - len(second.text))
			return 1.0 if delta_len <= self.delta_word_len_ignore else 0.0
		total = len(first.chars) + len(second.chars)
		imbalance = len(first.chars ^ second.chars)
		local = 1.0 - imbalance / total
		return local if local > self.min_word_similarity else 0.0

	def _significant(self, words: WordSet) -> WordSet:
		return tuple(w for w in words if len(w.text) >= self.minimum_word_len)

	def _best_scores(self, words: WordSet, others: WordSet) -> float:
		total = 0.0
		for word in words:
			best = 0.0
			for other in others:
				best = max(best, self.word_similarity(word, other))
				if best == 1.0:
					break
			total += best
		return total

	def compare_words(self, first: WordSet, second: WordSet) -> float:
		if not first and not second:
			return 1.0
		first_sig = self._significant(first)
		second_sig = self._significant(second)
		# only short words on both sides: score them rather than nothing
		if first_sig or second_sig:
			first, second = first_sig, second_sig
		if not first or not second:
			return 0.0
		matched = self._best_scores(first, second) + self._best_scores(second, first)
		return min(matched / (len(first) + len(second)), 1.0)

	def similarity(self, text_a: str, text_b: str) -> float:
		"""Compare two titles, ignoring word order. Returns 1.0 for two empty inputs.

		Meant for strings up to ``max_length`` characters. Longer strings are still
		compared, without any accuracy or cost guarantee.
		"""
		if len(text_a) > self.max_length or len(text_b) > self.max_length:
			logger.debug(
				f"Comparing strings of length {len(text_a)} and {len(text_b)}; "
				f"inputs above {self.max_length} characters are unsupported"
			)
		first = tokenize(text_a, case_sensitive=self.case_sensitive)
		second = tokenize(text_b, case_sensitive=self.case_sensitive)
		return self.compare_words(first, second)


@lru_cache(maxsize=1)
def get_comparator() -> Comparator:
	return Comparator.from_settings(get_settings())


def similarity(text_a: str, text_b: str) -> float:
	return get_comparator().similarity(text_a, text_b)

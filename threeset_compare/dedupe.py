from __future__ import annotations

from typing import List, Optional, Sequence, Set

from loguru import logger

from .comparator import Comparator, get_comparator
from .config import get_settings
from .schemas import DuplicatePair, RankedTitle
from .utils.text import normalize_title, tokenize


def _resolve_threshold(threshold: Optional[float]) -> float:
	value = get_settings().dedupe_threshold if threshold is None else threshold
	if not 0.0 <= value <= 1.0:
		raise ValueError(f"threshold must be within [0, 1], got {value}")
	return value


def find_duplicate_pairs(
	titles: Sequence[str],
	threshold: Optional[float] = None,
	comparator: Optional[Comparator] = None,
) -> List[DuplicatePair]:
	threshold_effective = _resolve_threshold(threshold)
	cmp = comparator or get_comparator()
	word_sets = [tokenize(t, case_sensitive=cmp.case_sensitive) for t in titles]
	pairs: List[DuplicatePair] = []
	for i in range(len(word_sets)):
		for j in range(i + 1, len(word_sets)):
			score = cmp.compare_words(word_sets[i], word_sets[j])
			if score >= threshold_effective:
				pairs.append(DuplicatePair(index_a=i, index_b=j, score=score))
	logger.debug(f"Found {len(pairs)} duplicate pairs among {len(titles)} titles (threshold={threshold_effective})")
	return pairs


def deduplicate_titles(
	titles: Sequence[str],
	threshold: Optional[float] = None,
	comparator: Optional[Comparator] = None,
) -> List[str]:
	# Exact normalized matches first, then similarity against everything seen so far
	threshold_effective = _resolve_threshold(threshold)
	cmp = comparator or get_comparator()
	seen_exact: Set[str] = set()
	candidates: List[str] = []
	for t in titles:
		key = " ".join(t.split()) if cmp.case_sensitive else normalize_title(t)
		if key in seen_exact:
			continue
		seen_exact.add(key)
		candidates.append(t)
	word_sets = [tokenize(t, case_sensitive=cmp.case_sensitive) for t in candidates]
	kept: List[str] = []
	for i, (t, words) in enumerate(zip(candidates, word_sets)):
		is_dup = False
		for other in word_sets[:i]:
			if cmp.compare_words(words, other) >= threshold_effective:
				is_dup = True
				break
		if not is_dup:
			kept.append(t)
	logger.debug(f"Deduplicated {len(titles)} titles down to {len(kept)}")
	return kept


def rank_titles(
	query: str,
	titles: Sequence[str],
	top_k: Optional[int] = None,
	comparator: Optional[Comparator] = None,
) -> List[RankedTitle]:
	top_k_effective = get_settings().top_k if top_k is None else top_k
	if top_k_effective < 1:
		raise ValueError(f"top_k must be >= 1, got {top_k_effective}")
	cmp = comparator or get_comparator()
	query_words = tokenize(query, case_sensitive=cmp.case_sensitive)
	scored = [
		RankedTitle(index=idx, title=t, score=cmp.compare_words(query_words, tokenize(t, case_sensitive=cmp.case_sensitive)))
		for idx, t in enumerate(titles)
	]
	scored.sort(key=lambda r: r.score, reverse=True)
	return scored[:top_k_effective]

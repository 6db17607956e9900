import pytest

from threeset_compare import Comparator
from threeset_compare.dedupe import deduplicate_titles, find_duplicate_pairs, rank_titles

TITLES = [
	"Large Language Models for Clinical Decision Support",
	"Clinical decision support with large language models",
	"large language models for clinical decision support",
	"Graph Neural Networks in Chemistry",
	"Chemistry in Graph Neural Netwroks",
]


def test_deduplicate_keeps_first_occurrence_in_order():
	kept = deduplicate_titles(TITLES)

	# the reworded title only scores 12/14 against the first one
	assert kept == [
		"Large Language Models for Clinical Decision Support",
		"Clinical decision support with large language models",
		"Graph Neural Networks in Chemistry",
	]
	assert deduplicate_titles(TITLES, threshold=0.8) == [
		"Large Language Models for Clinical Decision Support",
		"Graph Neural Networks in Chemistry",
	]


def test_deduplicate_with_strict_threshold_only_drops_exact_copies():
	kept = deduplicate_titles(TITLES, threshold=1.0)

	assert "large language models for clinical decision support" not in kept
	assert "Chemistry in Graph Neural Netwroks" not in kept
	assert "Clinical decision support with large language models" in kept


def test_deduplicate_empty_list():
	assert deduplicate_titles([]) == []


def test_find_duplicate_pairs():
	pairs = find_duplicate_pairs(TITLES, threshold=0.8)
	found = {(p.index_a, p.index_b) for p in pairs}

	assert (0, 2) in found
	assert (3, 4) in found
	assert (0, 3) not in found
	assert all(p.index_a < p.index_b and p.score >= 0.8 for p in pairs)


def test_threshold_out_of_range():
	with pytest.raises(ValueError):
		deduplicate_titles(TITLES, threshold=1.5)
	with pytest.raises(ValueError):
		find_duplicate_pairs(TITLES, threshold=-0.1)


def test_rank_titles_orders_by_score():
	results = rank_titles("neural networks for chemistry", TITLES, top_k=3)

	assert len(results) == 3
	assert results[0].index in (3, 4)
	assert [r.score for r in results] == sorted((r.score for r in results), reverse=True)


def test_rank_titles_default_top_k_and_invalid():
	assert len(rank_titles("anything", TITLES)) == len(TITLES)
	with pytest.raises(ValueError):
		rank_titles("anything", TITLES, top_k=0)


def test_custom_comparator_is_used():
	cmp = Comparator(case_sensitive=True)
	kept = deduplicate_titles(["Deep Learning", "DEEP LEARNING"], comparator=cmp)

	assert kept == ["Deep Learning", "DEEP LEARNING"]

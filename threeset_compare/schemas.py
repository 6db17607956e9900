from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CompareRequest(BaseModel):
	text_a: str
	text_b: str


class CompareResponse(BaseModel):
	text_a: str
	text_b: str
	score: float = Field(ge=0.0, le=1.0)


class DuplicatePair(BaseModel):
	model_config = ConfigDict(frozen=True)
	# Indices into the submitted title list, index_a < index_b
	index_a: int
	index_b: int
	score: float


class DedupeRequest(BaseModel):
	titles: List[str]
	threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class DedupeResponse(BaseModel):
	kept: List[str]
	duplicates: List[DuplicatePair]
	num_input: int
	num_kept: int


class RankedTitle(BaseModel):
	model_config = ConfigDict(frozen=True)
	index: int
	title: str
	score: float


class RankRequest(BaseModel):
	query: str
	titles: List[str]
	top_k: Optional[int] = Field(default=None, ge=1)


class RankResponse(BaseModel):
	query: str
	results: List[RankedTitle]

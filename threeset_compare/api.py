from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from loguru import logger

from . import __version__
from .comparator import get_comparator
from .dedupe import deduplicate_titles, find_duplicate_pairs, rank_titles
from .schemas import CompareRequest, CompareResponse, DedupeRequest, DedupeResponse, RankRequest, RankResponse

app = FastAPI(title="ThreeSet Compare API", version=__version__, default_response_class=ORJSONResponse)

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)


@app.get("/healthz")
async def healthz() -> dict:
	return {"status": "ok", "version": __version__}


@app.post("/similarity", response_model=CompareResponse)
async def similarity_endpoint(req: CompareRequest) -> CompareResponse:
	score = get_comparator().similarity(req.text_a, req.text_b)
	return CompareResponse(text_a=req.text_a, text_b=req.text_b, score=score)


@app.post("/dedupe", response_model=DedupeResponse)
async def dedupe_endpoint(req: DedupeRequest) -> DedupeResponse:
	kept = deduplicate_titles(req.titles, threshold=req.threshold)
	duplicates = find_duplicate_pairs(req.titles, threshold=req.threshold)
	logger.info(f"Dedupe request: {len(req.titles)} titles in, {len(kept)} kept")
	return DedupeResponse(kept=kept, duplicates=duplicates, num_input=len(req.titles), num_kept=len(kept))


@app.post("/rank", response_model=RankResponse)
async def rank_endpoint(req: RankRequest) -> RankResponse:
	return RankResponse(query=req.query, results=rank_titles(req.query, req.titles, top_k=req.top_k))

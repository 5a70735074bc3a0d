"""
FastAPI wrapper for SEO Keyword Engine - Vercel Serverless Function.

This module exposes content analysis and keyword insertion as a REST API
for deployment on Vercel.
"""

import logging
from dataclasses import asdict
from datetime import datetime
from typing import Annotated, Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seo_keyword_engine import __version__
from seo_keyword_engine.analysis import ContentValidationError, SeoAnalyzer
from seo_keyword_engine.config import EngineConfig
from seo_keyword_engine.insertion import insert_keyword, insert_keywords_bulk
from seo_keyword_engine.storage import InMemoryAnalysisStore

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Keyword Engine API",
    description="Content SEO analysis and natural keyword insertion",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

config = EngineConfig.from_env()
analyzer = SeoAnalyzer(config=config)
store = InMemoryAnalysisStore()


# ============================================================================
# Request / Response Models
# ============================================================================

class CamelModel(BaseModel):
    """Base model that reads and writes camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# At least one non-whitespace character; the value itself is not stripped
NonEmptyStr = Annotated[str, StringConstraints(min_length=1, pattern=r"\S")]


class AnalyzeRequest(CamelModel):
    """Request model for content analysis."""
    content: NonEmptyStr


class InsertKeywordRequest(CamelModel):
    """Request model for single keyword insertion."""
    content: NonEmptyStr
    keyword: NonEmptyStr
    position: Optional[int] = Field(
        default=None,
        description="Sentence index to insert into; chosen automatically when omitted",
    )


class InsertKeywordResponse(CamelModel):
    """Response model for single keyword insertion."""
    optimized_content: str
    original_length: int
    new_length: int
    keyword_inserted: bool


class BulkInsertRequest(CamelModel):
    """Request model for bulk keyword insertion."""
    content: NonEmptyStr
    keywords: list[NonEmptyStr] = Field(..., min_length=1)


class BulkInsertResponse(CamelModel):
    """Response model for bulk keyword insertion."""
    optimized_content: str
    inserted_keywords: list[str]
    skipped_keywords: list[str]
    total_inserted: int
    original_length: int
    new_length: int


class AnalysisRecordResponse(CamelModel):
    """A stored analysis record."""
    id: int
    content: str
    readability_score: Optional[float] = None
    seo_score: Optional[float] = None
    keyword_density: Optional[float] = None
    suggested_keywords: Optional[list[dict[str, Any]]] = None
    optimization_tips: Optional[list[dict[str, Any]]] = None
    analysis_results: Optional[dict[str, Any]] = None
    created_at: datetime


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    enrichment_configured: bool


# ============================================================================
# Error Handlers
# ============================================================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 with field errors."""
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        enrichment_configured=config.has_enrichment,
    )


@app.post("/api/analyze")
async def analyze_content(request: AnalyzeRequest):
    """
    Analyze content for readability, keyword density and SEO score.

    Enrichment failures are absorbed by the analyzer and never surface here.
    """
    try:
        result = await run_in_threadpool(analyzer.analyze, request.content)
    except ContentValidationError as e:
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request data", "errors": [{"msg": str(e)}]},
        )
    except Exception:
        logger.exception("Content analysis failed")
        raise HTTPException(status_code=500, detail="Failed to analyze content")

    store.create(request.content)
    return result.to_dict()


@app.post("/api/insert-keyword", response_model=InsertKeywordResponse)
async def insert_single_keyword(request: InsertKeywordRequest):
    """Insert one keyword into content at the best (or requested) sentence."""
    try:
        optimized = insert_keyword(request.content, request.keyword, request.position)
    except Exception:
        logger.exception(f"Keyword insertion failed for '{request.keyword}'")
        raise HTTPException(status_code=500, detail="Failed to insert keyword")

    return InsertKeywordResponse(
        optimized_content=optimized,
        original_length=len(request.content),
        new_length=len(optimized),
        keyword_inserted=request.keyword.lower() in optimized.lower(),
    )


@app.post("/api/insert-keywords-bulk", response_model=BulkInsertResponse)
async def insert_keywords(request: BulkInsertRequest):
    """Insert several keywords in request order, skipping duplicates."""
    try:
        result = insert_keywords_bulk(request.content, request.keywords)
    except Exception:
        logger.exception("Bulk keyword insertion failed")
        raise HTTPException(status_code=500, detail="Failed to insert keywords")

    return BulkInsertResponse(
        optimized_content=result.content,
        inserted_keywords=result.inserted,
        skipped_keywords=result.skipped,
        total_inserted=result.total_inserted,
        original_length=len(request.content),
        new_length=len(result.content),
    )


@app.get("/api/analyses", response_model=list[AnalysisRecordResponse])
async def list_analyses():
    """List stored analysis records."""
    return [AnalysisRecordResponse(**asdict(r)) for r in store.list_all()]


@app.get("/api/analyses/{record_id}", response_model=AnalysisRecordResponse)
async def get_analysis(record_id: int):
    """Fetch one stored analysis record."""
    record = store.get(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return AnalysisRecordResponse(**asdict(record))


@app.get("/api/info")
async def api_info():
    """API information endpoint."""
    return {
        "name": "SEO Keyword Engine API",
        "version": __version__,
        "endpoints": {
            "POST /api/analyze": "Score content and suggest keywords",
            "POST /api/insert-keyword": "Insert a single keyword",
            "POST /api/insert-keywords-bulk": "Insert several keywords in order",
            "GET /api/analyses": "List stored analysis records",
            "GET /api/analyses/{id}": "Get one analysis record",
            "GET /api/health": "Health check",
        },
    }

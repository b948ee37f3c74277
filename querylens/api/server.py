"""
FastAPI server for the Querylens text-to-SQL service.

Provides:
- Schema listing (/api/tables)
- Question answering with SQL, result, summary and optional chart (/api/query)
- Liveness endpoints (/ and /health)
"""

# ================================
# IMPORTS
# ================================

import logging
from typing import Dict, List, Any, Optional
from contextlib import asynccontextmanager

from pydantic import BaseModel, Field
from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware

from querylens.common.env import load_environment

# Load environment variables before importing pipeline components
load_environment()

from querylens.common.config import config
from querylens.common.constants import (
    BACKEND_BANNER,
    ERROR_QUERY_FALLBACK,
    ERROR_QUERY_REQUIRED,
    ERROR_SCHEMA_FETCH
)
from querylens.api.app_context import initialize_app_context, cleanup_app_context
from querylens.text_to_sql.errors import QueryPipelineError, SchemaFetchError
from querylens.text_to_sql.pipeline.graph import run_query_pipeline
from querylens.text_to_sql.tools.schema_inspector import fetch_schema

# ================================
# CONFIGURATION & SETUP
# ================================

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Acquire the engine and LLM client on startup, release them on shutdown."""
    logger.info("Initializing resources...")
    initialize_app_context()
    logger.info("Application ready!")

    try:
        yield
    finally:
        cleanup_app_context()
        logger.info("Application shutdown complete")


# ================================
# FASTAPI APP SETUP
# ================================

app = FastAPI(
    title="Querylens API",
    description="Ask questions about a relational database in natural language",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ================================
# PYDANTIC MODELS
# ================================


class QueryRequest(BaseModel):
    # Any JSON value is accepted here; anything but a non-blank string is a 400
    query: Any = Field(None, description="Natural language question")


class ColumnResponse(BaseModel):
    column_name: str
    data_type: str
    column_type: str


class ChartDataset(BaseModel):
    label: str
    data: List[Any]
    backgroundColor: str
    borderColor: str
    borderWidth: int


class ChartSeries(BaseModel):
    type: str = Field(..., description="Chart kind, always 'bar'")
    labels: List[Any]
    datasets: List[ChartDataset]


class QueryResponse(BaseModel):
    query: str = Field(..., description="SQL that was executed")
    result: List[Dict[str, Any]] = Field(..., description="Result rows")
    summary: str = Field(..., description="Plain-prose answer")
    chart: Optional[ChartSeries] = Field(None, description="Bar chart series, when one fits")


def error_response(status_code: int, message: str) -> JSONResponse:
    """Error body shape shared by every endpoint."""
    return JSONResponse(status_code=status_code, content={"error": message})


# ================================
# API ENDPOINTS
# ================================


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Basic liveness banner."""
    return BACKEND_BANNER


@app.get("/api/tables", response_model=Dict[str, List[ColumnResponse]])
def list_tables():
    """Return every table with its columns, read fresh from the catalog."""
    try:
        schema = fetch_schema()
    except SchemaFetchError as e:
        logger.error(f"Error fetching tables: {e}")
        return error_response(500, ERROR_SCHEMA_FETCH)

    return {
        table_name: [column.to_dict() for column in columns]
        for table_name, columns in schema.items()
    }


@app.post("/api/query", response_model=QueryResponse)
async def query_endpoint(request: Optional[QueryRequest] = None):
    """
    Answer a natural language question.

    Returns the SQL, its rows, a prose summary and an optional chart. Any
    fatal stage failure yields a 500 with only an error message.
    """
    query = request.query if request is not None else None
    if not isinstance(query, str) or not query.strip():
        return error_response(400, ERROR_QUERY_REQUIRED)
    question = query.strip()

    try:
        payload = await run_query_pipeline(question)
    except QueryPipelineError as e:
        logger.error(f"Error processing query ({e.stage}): {e}")
        return error_response(500, e.message or ERROR_QUERY_FALLBACK)
    except Exception as e:
        logger.error(f"Error processing query: {e}", exc_info=True)
        return error_response(500, str(e) or ERROR_QUERY_FALLBACK)

    return QueryResponse(**payload)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="Querylens API Server")
    parser.add_argument("--port", type=int, default=config.server.port, help="Port to run the server on")
    parser.add_argument("--host", type=str, default=config.server.host, help="Host to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    logger.info(f"Starting Querylens API server on {args.host}:{args.port}")

    uvicorn.run(
        "querylens.api.server:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        reload_dirs=["querylens"] if args.reload else None,
    )

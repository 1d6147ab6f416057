"""
FastAPI backend for Code Complexity Analyzer.

Serves the single-page widget and the analysis endpoint.
"""

import time
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel, Field

# Load environment variables before settings are read
load_dotenv()

from core.analyzer import CodeComplexityAnalyzer  # noqa: E402
from core.config import settings, logger  # noqa: E402
from core.models import (  # noqa: E402
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    AnalysisRequest,
    AnalysisResult,
    Language,
)

__version__ = "1.0.0"

STATIC_DIR = Path(__file__).resolve().parent / "static"


# Request/Response Models
class AnalyzeRequest(BaseModel):
    """Request model. sequence is echoed back so the page can drop stale replies."""
    code: str = Field(default="", max_length=settings.MAX_CODE_LENGTH, description="Code to analyze")
    language: Language = Field(default=DEFAULT_LANGUAGE, description="Programming language")
    sequence: int | None = Field(default=None, description="Client-side request counter")


class AnalyzeResponse(BaseModel):
    """Response model with analysis results."""
    success: bool
    sequence: int | None = None
    result: AnalysisResult
    model: str


# Initialize FastAPI
app = FastAPI(
    title="Code Complexity Analyzer",
    description="Analyze time and space complexity of code using LLM",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log the failure without request bodies."""
    logger.error(
        "Unhandled exception on %s %s: %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        str(exc)[:200],
    )
    return JSONResponse(status_code=500, content={"success": False, "error": "Internal server error"})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log field names and error types only, never values."""
    error_details = [
        {"field": err.get("loc", [])[-1] if err.get("loc") else "unknown", "type": err.get("type")}
        for err in exc.errors()[:5]
    ]
    logger.warning("Validation error on %s %s: %s", request.method, request.url.path, error_details)
    return JSONResponse(status_code=422, content={"success": False, "error": "Invalid request format"})


@app.get("/", include_in_schema=False)
async def root():
    """Single-page widget."""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
async def health():
    """Health check."""
    return {
        "status": "ok" if settings.GROQ_API_KEY else "unavailable",
        "model": settings.GROQ_MODEL,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/languages")
async def languages():
    """Languages offered by the selector."""
    return {"languages": list(SUPPORTED_LANGUAGES), "default": DEFAULT_LANGUAGE}


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_code(request: AnalyzeRequest):
    """
    Analyze code complexity.

    Failures come back as display state in result.error, never as HTTP errors.
    """
    request_id = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    start_time = time.time()

    logger.info(f"[{request_id}] REQUEST RECEIVED - Language: {request.language} - Code length: {len(request.code)} chars")

    async with CodeComplexityAnalyzer() as analyzer:
        result = await analyzer.analyze(
            AnalysisRequest(code=request.code, language=request.language)
        )

    elapsed_time = time.time() - start_time
    if result.error:
        logger.warning(f"[{request_id}] REQUEST FAILED - Time taken: {elapsed_time:.3f}s - Error: {result.error}")
    else:
        logger.info(f"[{request_id}] REQUEST COMPLETED - Time taken: {elapsed_time:.3f}s - Result: {result.timeComplexity}, {result.spaceComplexity}")

    return AnalyzeResponse(
        success=result.error is None,
        sequence=request.sequence,
        result=result,
        model=settings.GROQ_MODEL,
    )


def main():
    """Run the server."""
    import uvicorn

    logger.info(f"Starting Code Complexity Analyzer on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "backend:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

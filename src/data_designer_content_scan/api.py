# HTTP handlers for the content tools.
#
# Each handler validates the JSON body, calls the pure engine function and
# returns the result payload. Validation failures are 400s, anything else that
# escapes a handler is logged and returned as a generic 500.

from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from data_designer_content_scan.density import analyze_density
from data_designer_content_scan.detector import detect
from data_designer_content_scan.seo import score_seo, suggest_tags
from data_designer_content_scan.title_case import to_title_case

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 50

# -------------------- Request models --------------------


class ContentIn(BaseModel):
    content: str = Field(min_length=MIN_CONTENT_LENGTH, description="Text to analyze, at least 50 characters")


class TitleCaseIn(BaseModel):
    text: str = Field(min_length=1)


class SeoScoreIn(BaseModel):
    content: str = Field(min_length=1)
    title: str = Field(min_length=1)
    keywords: Optional[str] = None  # comma separated


# -------------------- App + CORS --------------------

app = FastAPI(title="Content Scan")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid input", "details": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# -------------------- Tools --------------------


@app.post("/api/keyword-density")
def keyword_density(body: ContentIn):
    report = analyze_density(body.content)
    logger.debug(f"keyword density: {report.total_words} words, {report.unique_keyword_count} unique")
    return report.to_payload()


@app.post("/api/ai-detector")
def ai_detector(body: ContentIn):
    result = detect(body.content)
    logger.debug(f"ai detector: probability={result.ai_probability} verdict={result.verdict!r}")
    return result.to_payload()


@app.post("/api/title-case")
def title_case(body: TitleCaseIn):
    return to_title_case(body.text).to_payload()


@app.post("/api/seo-score")
def seo_score(body: SeoScoreIn):
    report = score_seo(body.content, body.title, body.keywords)
    payload = report.to_payload()
    payload["tags"] = suggest_tags(body.title, body.keywords)
    return payload


@app.get("/healthz")
def healthz():
    return {"ok": True}


def main() -> None:
    import uvicorn

    logging.basicConfig(level=os.getenv("CONTENT_SCAN_LOG_LEVEL", "INFO"))
    host = os.getenv("CONTENT_SCAN_HOST", "127.0.0.1")
    port = int(os.getenv("CONTENT_SCAN_PORT", "8000"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()

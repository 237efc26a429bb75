"""
Roman Numeral — FastAPI Server
===============================

HTTP API over the numeral converter.

Endpoints:
    POST /convert             Convert a value in whichever direction it implies
    GET  /roman/{number}      Integer -> numeral
    GET  /decimal/{numeral}   Numeral -> integer
    GET  /health              Health check and readiness

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from roman_numeral import __version__
from roman_numeral.converter import NumeralConverter
from roman_numeral.exceptions import RomanNumeralError
from roman_numeral.generator import MAX_DECIMAL
from roman_numeral.models import ConversionResult, Notation

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan ───────────────────────────────────────────

_converter: NumeralConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the converter (reads ROMAN_NOTATION) on startup."""
    global _converter  # noqa: PLW0603
    _converter = NumeralConverter()
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Roman Numeral API",
    description=(
        "Bidirectional Roman numeral conversion. Lenient reading of historical "
        "spellings, strict canonical writing, and vinculum (×1000) notation "
        "as X̅ or _X."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: str = Field(
        ...,
        min_length=1,
        description="All digits for integer -> numeral, anything else is read as a numeral.",
        json_schema_extra={"example": "MCMXXCIIV"},
    )
    notation: Optional[Notation] = Field(
        default=None,
        description="Output notation for overlined numerals; defaults to ROMAN_NOTATION.",
    )


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    version: str
    max_value: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter(notation: Notation | None = None) -> NumeralConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    if notation is not None and notation is not _converter.notation:
        return NumeralConverter(notation)
    return _converter


@app.exception_handler(RomanNumeralError)
async def _conversion_error_handler(request: Request, exc: RomanNumeralError) -> JSONResponse:
    logger.info("Rejected %s: [%s] %s", request.url.path, exc.code, exc.message)
    body = ErrorResponse(code=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(status_code=422, content=body.model_dump())


_ERROR_RESPONSES = {
    422: {"model": ErrorResponse, "description": "Value cannot be converted"},
    503: {"description": "Converter not yet initialised"},
}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert an integer or a numeral",
    tags=["Conversion"],
    responses=_ERROR_RESPONSES,
)
def convert(request: ConvertRequest) -> ConversionResult:
    """Convert `value`, choosing the direction from its shape.

    - `"1983"` -> `MCMLXXXIII`
    - `"MCMXXCIIV"` -> `1983` (with `canonical` = `MCMLXXXIII`)
    """
    return _get_converter(request.notation).convert(request.value)


@app.get(
    "/roman/{number}",
    summary="Integer to numeral",
    tags=["Conversion"],
    responses=_ERROR_RESPONSES,
)
def to_roman(number: int, notation: Optional[Notation] = None) -> ConversionResult:
    return _get_converter(notation).to_roman(number)


@app.get(
    "/decimal/{numeral}",
    summary="Numeral to integer",
    tags=["Conversion"],
    responses=_ERROR_RESPONSES,
)
def to_decimal(numeral: str, notation: Optional[Notation] = None) -> ConversionResult:
    return _get_converter(notation).to_decimal(numeral)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and the supported range."""
    _get_converter()
    return HealthResponse(status="healthy", version=__version__, max_value=MAX_DECIMAL - 1)

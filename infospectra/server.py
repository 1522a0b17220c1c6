"""FastAPI router for infospectra.

Exposes the analysis pipeline to a presentation layer (tables, line
charts, 3D surface). Endpoints are registered on an ``APIRouter`` so that
``infospectra_server.py`` can mount them; the standalone ``app`` object
includes the router directly::

    uvicorn infospectra.server:app --reload --port 8430
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from infospectra import __version__
from infospectra.analysis.statistics import correlate_spectra
from infospectra.analysis.surface import build_surface
from infospectra.comparison import TextComparer
from infospectra.core.errors import (
    DegenerateStatisticError,
    DimensionMismatchError,
    InvalidInputError,
)
from infospectra.core.models import Aggregation, AnalysisResult
from infospectra.loaders import LoaderError, LoaderRegistry
from infospectra.pipeline import AnalysisConfig, run_pipeline
from shared.hardening import ErrorFormatter, InputValidator, ResourceLimits, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

app = FastAPI(
    title="infospectra API",
    description="Information spectra of texts: frequency tables, row/column spectra, comparison",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_DEFAULT_SETTINGS: dict[str, Any] = {
    "aggregation": Aggregation.SUM.value,
    "surface_resolution": 100,
    "max_file_size_mb": 5.0,
    "max_text_chars": 1_000_000,
    "max_grid_cells": 1_000_000,
}

_state: dict[str, Any] = {
    "settings": dict(_DEFAULT_SETTINGS),
}

_formatter = ErrorFormatter()


# ============================================================================
# Pydantic Models for API
# ============================================================================


class AnalyzeRequest(BaseModel):
    """Request body for analyzing one text."""

    text: str
    rows: int | None = None
    cols: int | None = None
    aggregation: Aggregation | None = None
    include_surface: bool = False


class CompareRequest(BaseModel):
    """Request body for comparing two texts."""

    text_a: str
    text_b: str
    rows: int | None = None
    cols: int | None = None
    aggregation: Aggregation | None = None


class StatisticsRequest(BaseModel):
    """Request body for summary statistics only."""

    text: str


class SettingsUpdate(BaseModel):
    """Partial update of server settings."""

    aggregation: Aggregation | None = None
    surface_resolution: int | None = Field(default=None, ge=2, le=500)
    max_file_size_mb: float | None = Field(default=None, gt=0)
    max_text_chars: int | None = Field(default=None, ge=1)
    max_grid_cells: int | None = Field(default=None, ge=1)


# ============================================================================
# Helpers
# ============================================================================


def _validator() -> InputValidator:
    settings = _state["settings"]
    return InputValidator(
        ResourceLimits(
            max_file_size_mb=settings["max_file_size_mb"],
            max_text_chars=settings["max_text_chars"],
            max_grid_cells=settings["max_grid_cells"],
        )
    )


def _config(
    rows: int | None,
    cols: int | None,
    aggregation: Aggregation | None,
) -> AnalysisConfig:
    default = Aggregation(_state["settings"]["aggregation"])
    return AnalysisConfig(rows=rows, cols=cols, aggregation=aggregation or default)


def _client_error(status_code: int, formatted: Any) -> HTTPException:
    return HTTPException(status_code=status_code, detail=formatted.to_dict())


def _analysis_payload(result: AnalysisResult, include_surface: bool = False) -> dict[str, Any]:
    """Serialize a result with its row/column correlation and optional surface."""
    payload = result.to_dict()
    try:
        payload["correlation"] = correlate_spectra(result.spectra).to_dict()
    except DegenerateStatisticError as exc:
        payload["correlation"] = None
        payload["correlation_error"] = str(exc)

    if include_surface:
        resolution = _state["settings"]["surface_resolution"]
        payload["surface"] = build_surface(result.spectra, resolution=resolution).to_dict()
    return payload


def _run_analysis(text: str, config: AnalysisConfig) -> AnalysisResult:
    try:
        validator = _validator()
        validator.validate_text(text)
        validator.validate_dimensions(config.rows, config.cols, len(text))
        return run_pipeline(text, config=config)
    except (ValidationError, InvalidInputError, DimensionMismatchError) as exc:
        raise _client_error(422, _formatter.format_analysis_error(exc)) from exc


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/api/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@router.post("/api/analyze")
async def analyze(request: AnalyzeRequest) -> dict[str, Any]:
    """Analyze one text.

    Returns the character grid, information grid, frequency table,
    spectra, summary statistics, and row/column correlation.
    """
    config = _config(request.rows, request.cols, request.aggregation)
    try:
        result = _run_analysis(request.text, config)
        return _analysis_payload(result, include_surface=request.include_surface)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Failed to analyze text")
        raise HTTPException(status_code=500, detail="Internal server error") from exc


@router.post("/api/analyze/upload")
async def analyze_upload(
    file: UploadFile = File(...),
    rows: int | None = None,
    cols: int | None = None,
    aggregation: Aggregation | None = None,
) -> dict[str, Any]:
    """Analyze an uploaded plain text file."""
    filename = file.filename or "upload"
    content = await file.read()

    try:
        _validator().validate_upload_size(len(content))
    except ValidationError as exc:
        raise _client_error(413, _formatter.format_upload_error(exc)) from exc

    try:
        loader = LoaderRegistry.get_loader(Path(filename))
    except LoaderError as exc:
        raise _client_error(415, _formatter.format_upload_error(exc)) from exc

    try:
        text = loader.decode(content)
    except LoaderError as exc:
        raise _client_error(422, _formatter.format_upload_error(exc)) from exc

    config = _config(rows, cols, aggregation)
    try:
        result = _run_analysis(text, config)
        payload = _analysis_payload(result)
        payload["filename"] = filename
        payload["warnings"] = loader.warnings
        return payload
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Failed to analyze uploaded file %s", filename)
        raise HTTPException(status_code=500, detail="Internal server error") from exc


@router.post("/api/compare")
async def compare(request: CompareRequest) -> dict[str, Any]:
    """Compare two texts by their information spectra."""
    validator = _validator()
    config = _config(request.rows, request.cols, request.aggregation)
    try:
        validator.validate_text(request.text_a)
        validator.validate_text(request.text_b)
        for text in (request.text_a, request.text_b):
            validator.validate_dimensions(config.rows, config.cols, len(text))
        comparison = TextComparer.compare(request.text_a, request.text_b, config)
        return comparison.to_dict()
    except (ValidationError, InvalidInputError, DimensionMismatchError) as exc:
        raise _client_error(422, _formatter.format_comparison_error(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to compare texts")
        raise HTTPException(status_code=500, detail="Internal server error") from exc


@router.post("/api/statistics")
async def statistics(request: StatisticsRequest) -> dict[str, Any]:
    """Summary statistics (capacity, entropy, redundancy) of one text."""
    config = _config(None, None, None)
    try:
        result = _run_analysis(request.text, config)
        return {
            "dimensions": {"rows": result.dimensions[0], "cols": result.dimensions[1]},
            "alphabet_size": result.frequency_table.alphabet_size,
            "total": result.frequency_table.total,
            **result.statistics.to_dict(),
        }
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Failed to compute statistics")
        raise HTTPException(status_code=500, detail="Internal server error") from exc


@router.get("/api/settings")
async def get_settings() -> dict[str, Any]:
    """Get current settings."""
    return dict(_state["settings"])


@router.post("/api/settings")
async def update_settings(update: SettingsUpdate) -> dict[str, Any]:
    """Update settings. Omitted fields keep their values."""
    settings = _state["settings"]
    for key, value in update.model_dump(exclude_none=True).items():
        settings[key] = value.value if isinstance(value, Aggregation) else value
    logger.info("Settings updated: %s", settings)
    return dict(settings)


def reset_settings() -> None:
    """Restore default settings."""
    _state["settings"] = dict(_DEFAULT_SETTINGS)


app.include_router(router)

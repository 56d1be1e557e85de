"""
Scoring API Router
ttscore/routers/scoring.py

Endpoints:
  GET  /api/v1/classify/{score}    — Band of a single score
  POST /api/v1/entries/validate    — Validate one raw field input
  POST /api/v1/results             — Compute + render the result summary (204 if a group is empty)
  POST /api/v1/results/export      — Same body, returns the A4 PDF
  GET  /api/v1/i18n/{locale}       — String table for a locale

Stateless: the client sends the full form each time.
"""

from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Union

import structlog

from ttscore.core.exceptions import ExportError, ScoreValidationError
from ttscore.i18n import lookup, strings
from ttscore.models.enumerations import GroupKey, Locale
from ttscore.models.score import Subject
from ttscore.models.summary import RenderableSummary
from ttscore.scoring.aggregator import GROUP_SLOTS, ScoreGroup
from ttscore.scoring.classifier import classify
from ttscore.scoring.session import compute_result, parse_field_key, parse_score
from ttscore.scoring.utils import format_one_decimal
from ttscore.services.document_exporter import DocumentExporter
from ttscore.services.presenter import render

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Scoring"])

RawScore = Union[int, str, None]


# =====================================================================
# Request / Response Models
# =====================================================================

class ClassifyResponse(BaseModel):
    score: int
    band: str
    label: str


class EntryValidateRequest(BaseModel):
    field: str = Field(..., description="Field key, e.g. 'movement_3'")
    value: RawScore = None
    locale: Locale = Locale.ID


class EntryValidateResponse(BaseModel):
    field: str
    value: Optional[int] = None
    band: Optional[str] = None
    label: str = ""


class ResultRequest(BaseModel):
    subject: Subject = Field(default_factory=Subject)
    movement: List[RawScore] = Field(default_factory=list, max_length=GROUP_SLOTS)
    outcome: List[RawScore] = Field(default_factory=list, max_length=GROUP_SLOTS)
    locale: Locale = Locale.ID


class GroupResult(BaseModel):
    mean: float
    mean_display: str
    band: str


class ResultPayload(BaseModel):
    movement: GroupResult
    outcome: GroupResult
    total_mean: float
    total_mean_display: str
    total_band: str


class ResultResponse(BaseModel):
    result: ResultPayload
    summary: RenderableSummary


# =====================================================================
# Helpers
# =====================================================================

def _build_group(key: GroupKey, raw_values: List[RawScore]) -> ScoreGroup:
    values = [
        parse_score(raw, f"{key.value}_{index}")
        for index, raw in enumerate(raw_values, start=1)
    ]
    return ScoreGroup.from_values(key, values)


def _group_payload(stats) -> GroupResult:
    return GroupResult(
        mean=float(stats.mean),
        mean_display=format_one_decimal(stats.mean),
        band=stats.band.value,
    )


def _compute(body: ResultRequest):
    movement = _build_group(GroupKey.MOVEMENT, body.movement)
    outcome = _build_group(GroupKey.OUTCOME, body.outcome)
    return compute_result(body.subject, movement, outcome)


def _validation_response(exc: ScoreValidationError, locale: Locale) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": lookup(locale, exc.message_key),
            "kind": exc.kind,
            "field": exc.field_key,
        },
    )


async def export_exception_handler(request: Request, exc: ExportError):
    logger.error("export_failed", kind=exc.kind.value, error=exc.message, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Document export failed"},
    )


# =====================================================================
# Endpoints
# =====================================================================

@router.get("/classify/{score}", response_model=ClassifyResponse, summary="Classify one score")
async def classify_score(score: int, locale: Locale = Query(default=Locale.ID)):
    band = classify(score)
    return ClassifyResponse(score=score, band=band.value, label=lookup(locale, band.value))


@router.post("/entries/validate", response_model=EntryValidateResponse, summary="Validate one field")
async def validate_field(body: EntryValidateRequest):
    try:
        parse_field_key(body.field)
    except ValueError as exc:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    try:
        value = parse_score(body.value, body.field)
    except ScoreValidationError as exc:
        return _validation_response(exc, body.locale)

    if value is None:
        return EntryValidateResponse(field=body.field)
    band = classify(value)
    return EntryValidateResponse(
        field=body.field,
        value=value,
        band=band.value,
        label=lookup(body.locale, band.value),
    )


@router.post(
    "/results",
    response_model=ResultResponse,
    summary="Compute and render the result",
    responses={204: {"description": "A group is empty; nothing to show"}},
)
async def compute_results(body: ResultRequest):
    try:
        result = _compute(body)
    except ScoreValidationError as exc:
        return _validation_response(exc, body.locale)
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return ResultResponse(
        result=ResultPayload(
            movement=_group_payload(result.movement),
            outcome=_group_payload(result.outcome),
            total_mean=float(result.total_mean),
            total_mean_display=format_one_decimal(result.total_mean),
            total_band=result.total_band.value,
        ),
        summary=render(body.subject, result, body.locale),
    )


@router.post(
    "/results/export",
    summary="Export the result summary as PDF",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}, 204: {"description": "A group is empty"}},
)
async def export_results(body: ResultRequest):
    try:
        result = _compute(body)
    except ScoreValidationError as exc:
        return _validation_response(exc, body.locale)
    if result is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    summary = render(body.subject, result, body.locale)
    document = await DocumentExporter().export(summary, body.subject.name)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{document.filename}"',
            "X-Page-Count": str(document.page_count),
        },
    )


@router.get("/i18n/{locale}", response_model=Dict[str, str], summary="String table")
async def get_strings(locale: Locale):
    return strings(locale)

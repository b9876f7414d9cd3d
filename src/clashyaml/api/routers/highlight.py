"""Highlight endpoint: POST /highlight."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from clashyaml.api.deps import get_settings
from clashyaml.api.schemas import HighlightRequest, HighlightResponse
from clashyaml.highlight import analyze, render_html
from clashyaml.settings import Settings

logger = logging.getLogger("clashyaml.api")

router = APIRouter()


@router.post("", response_model=HighlightResponse)
async def highlight(
    body: HighlightRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> HighlightResponse:
    """Tokenize YAML text into classified spans."""
    unit = body.unit or settings.offset_unit
    logger.debug("highlight called (text length=%d, unit=%s)", len(body.text), unit)
    spans = analyze(body.text, unit=unit)
    html = render_html(body.text, spans, unit=unit) if body.include_html else None
    return HighlightResponse(unit=unit, spans=spans, html=html)

"""Reference endpoint: GET /reference."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from clashyaml.api.schemas import ReferenceResponse, StyleInfo
from clashyaml.highlight.classifier import BOOLEAN_LITERALS, MAIN_SECTIONS, NULL_LITERALS
from clashyaml.highlight.palette import PALETTE

router = APIRouter()


@router.get("", response_model=ReferenceResponse)
async def get_reference() -> ReferenceResponse:
    """Return the fixed literal tables and the token style palette."""
    return ReferenceResponse(
        main_sections=sorted(MAIN_SECTIONS),
        boolean_literals=sorted(BOOLEAN_LITERALS),
        null_literals=sorted(NULL_LITERALS),
        palette={kind.value: StyleInfo(**asdict(style)) for kind, style in PALETTE.items()},
    )

"""Validation endpoint: POST /validate."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from clashyaml.api.deps import get_loader
from clashyaml.api.schemas import ValidateRequest, ValidateResponse
from clashyaml.parser.loader import ConfigLoader
from clashyaml.parser.validator import validate, validate_config_shape

logger = logging.getLogger("clashyaml.api")

router = APIRouter()


@router.post("", response_model=ValidateResponse)
async def validate_config(
    body: ValidateRequest,
    loader: ConfigLoader = Depends(get_loader),  # noqa: B008
) -> ValidateResponse:
    """Validate YAML syntax and, optionally, the Clash configuration shape.

    Always answers 200: an invalid document is a result, not an error.
    """
    logger.debug(
        "validate called (yaml length=%d, check_shape=%s)", len(body.config_yaml), body.check_shape
    )
    if body.check_shape:
        result = validate_config_shape(body.config_yaml, loader)
    else:
        result = validate(body.config_yaml, loader)
    return ValidateResponse(
        valid=result.is_valid,
        diagnostics=result.diagnostics,
        warnings=result.warnings,
        error=result.error,
    )

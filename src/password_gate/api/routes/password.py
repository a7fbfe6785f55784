"""Password policy endpoints: check, submit, and describe requirements."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from password_gate.api.schemas.password import (
    PasswordRequest,
    RequirementsResponse,
    SubmitResponse,
)
from password_gate.validator import PolicyValidator, ValidationResult, get_validator

logger = logging.getLogger(__name__)
router = APIRouter(tags=["password"])


@router.post("/password/validate", response_model=ValidationResult)
def validate(
    body: PasswordRequest,
    validator: PolicyValidator = Depends(get_validator),
):
    """Return the full verdict without accepting the password."""
    return validator.validate(body.password)


@router.post("/password/submit", response_model=SubmitResponse)
def submit(
    body: PasswordRequest,
    validator: PolicyValidator = Depends(get_validator),
):
    """Accept a password that meets the policy, or 422 with every violation."""
    result = validator.validate(body.password)
    if not result.is_valid:
        logger.info("Password submission rejected (%d violations)", len(result.errors))
        raise HTTPException(
            status_code=422,
            detail=list(result.errors),
        )

    logger.info("Password submission accepted")
    return SubmitResponse()


@router.get("/password/requirements", response_model=RequirementsResponse)
def requirements(validator: PolicyValidator = Depends(get_validator)):
    config = validator.config
    return RequirementsResponse(
        requirements=validator.requirements(),
        min_length=config.min_length,
        max_length=config.max_length,
        min_classes_required=config.min_classes_required,
        max_consecutive_repeat=config.max_consecutive_repeat,
    )

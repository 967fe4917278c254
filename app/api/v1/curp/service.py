"""CURP service: maps the request to a PersonRecord and applies the error policy."""

import logging

from app.core.config import Settings
from app.core.enums import Gender
from app.core.exceptions import InvalidGenderError, ServiceError
from app.curp.differentiator import Differentiator
from app.curp.generator import PersonRecord, generate_curp

from .schemas import CurpRequest, CurpResponse

logger = logging.getLogger(__name__)

GENERATION_ERROR = "Error generating CURP"


def _to_record(payload: CurpRequest) -> PersonRecord:
    return PersonRecord(
        first_name=payload.first_name,
        paternal_surname=payload.father_surname,
        maternal_surname=payload.mother_surname,
        birth_date=payload.birth_date,
        gender=payload.gender,
        birth_region=payload.birth_state,
    )


def _check_gender(gender: str) -> None:
    if gender not in {g.value for g in Gender}:
        raise InvalidGenderError(gender)


def create_curp(
    payload: CurpRequest,
    differentiator: Differentiator,
    app_settings: Settings,
) -> CurpResponse:
    """
    Generate a code for the payload.

    With curp_fold_errors on, a ServiceError becomes a normal response whose curp
    field is GENERATION_ERROR; otherwise the error is re-raised for the router.
    """
    try:
        if app_settings.curp_strict_gender:
            _check_gender(payload.gender)
        curp = generate_curp(_to_record(payload), differentiator)
    except ServiceError as e:
        logger.warning("CURP generation failed: %s", e.message)
        if app_settings.curp_fold_errors:
            return CurpResponse(curp=GENERATION_ERROR)
        raise

    logger.debug("CURP generated for state code %s", curp[11:13])
    return CurpResponse(curp=curp)

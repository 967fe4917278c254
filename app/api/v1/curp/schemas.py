"""CURP generation request/response schemas (snake_case, matching the frontend form)."""

from pydantic import BaseModel, Field


class CurpRequest(BaseModel):
    first_name: str = Field(..., description="Given name(s)")
    father_surname: str = Field(..., description="Paternal surname")
    mother_surname: str = Field("", description="Maternal surname; empty when absent")
    birth_date: str = Field(..., description="Birth date, YYYY-MM-DD")
    gender: str = Field(..., min_length=1, max_length=1, description="'H' for male, 'M' for female")
    birth_state: str = Field(..., description="Birth state name (e.g. Jalisco)")


class CurpResponse(BaseModel):
    curp: str

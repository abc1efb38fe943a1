from __future__ import annotations

"""Pydantic models for the state reference data, fun facts and API payloads."""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class StaticStateRecord(BaseModel):
    """One row of the bundled state dataset. Read-only for the process lifetime."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str
    name: str = Field(validation_alias=AliasChoices("name", "state"))
    capital: str = Field(validation_alias=AliasChoices("capital", "capital_city"))
    nickname: str
    population: int = Field(ge=0)
    admission_date: str = Field(validation_alias=AliasChoices("admission_date", "admission"))
    admission_number: Optional[int] = None

    @field_validator("code")
    @classmethod
    def _upper_code(cls, value: str) -> str:
        value = value.strip().upper()
        if len(value) != 2 or not value.isalpha():
            raise ValueError(f"state code must be two letters, got {value!r}")
        return value


class FactRecord(BaseModel):
    """Persisted per-state list of fun facts, stored as {stateCode, facts}."""

    model_config = ConfigDict(populate_by_name=True)

    state_code: str = Field(alias="stateCode")
    facts: List[str] = Field(default_factory=list)


class MergedStateView(BaseModel):
    """A static record combined with its fun facts for responses."""

    code: str
    name: str
    capital: str
    nickname: str
    population: int
    admission_date: str
    admission_number: Optional[int] = None
    facts: List[str] = Field(default_factory=list)


class CapitalResponse(BaseModel):
    name: str
    capital: str


class NicknameResponse(BaseModel):
    name: str
    nickname: str


class PopulationResponse(BaseModel):
    name: str
    population: str


class AdmissionResponse(BaseModel):
    name: str
    admission: str


class FunFactResponse(BaseModel):
    funfact: str


# Request bodies keep their fields loosely typed so the handlers can tell a
# missing value apart from a malformed one and answer with distinct messages.


class FactsAddRequest(BaseModel):
    """Body of POST /states/{code}/funfact."""

    facts: Any = Field(default=None, validation_alias=AliasChoices("facts", "funfacts"))


class FactUpdateRequest(BaseModel):
    """Body of PATCH /states/{code}/funfact. The index is 1-based."""

    index: Any = None
    facts: Any = Field(default=None, validation_alias=AliasChoices("facts", "funfact"))


class FactDeleteRequest(BaseModel):
    """Body of DELETE /states/{code}/funfact. The index is 1-based."""

    index: Any = None

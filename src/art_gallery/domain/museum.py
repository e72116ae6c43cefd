"""Pydantic models for Harvard Art Museums object records."""

from pydantic import BaseModel, ConfigDict


class MuseumPerson(BaseModel):
    """Person associated with a museum object."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None


class MuseumRecord(BaseModel):
    """Object record as returned by the museum API; every field is optional."""

    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    title: str | None = None
    people: list[MuseumPerson] | None = None
    classification: str | None = None
    dated: str | None = None
    description: str | None = None
    primaryimageurl: str | None = None
    culture: str | None = None
    medium: str | None = None


class MuseumPage(BaseModel):
    """A page of object records."""

    model_config = ConfigDict(extra="ignore")

    records: list[MuseumRecord] | None = None

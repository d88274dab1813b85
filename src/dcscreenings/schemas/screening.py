"""Pydantic schemas for screening data and the snapshot feed."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Screening(BaseModel):
    """One showing of one title at one venue, in canonical form.

    Instances are frozen; enrichment builds a new one with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(min_length=1, max_length=100)
    venue: str = Field(min_length=1)
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    time: str = Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    poster: str | None = None
    ticket_link: str | None = Field(default=None, alias="ticketLink")


class ScreeningFeed(BaseModel):
    """Merged, sorted screenings plus the time the run produced them.

    Serializes (``by_alias=True``) to the snapshot format read by the front end:
    ``{"lastUpdated": ..., "screenings": [...]}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    generated_at: datetime = Field(alias="lastUpdated")
    screenings: list[Screening] = Field(default_factory=list)

"""Pydantic schemas for screenings and the snapshot feed."""

from dcscreenings.schemas.screening import Screening, ScreeningFeed

__all__ = [
    "Screening",
    "ScreeningFeed",
]

"""Pydantic models for the upstream content API's raw JSON shape.

The upstream export mixes casing (``Date``, ``Name``) and nests records in
``*_id`` wrappers.  These models are the only place that knows about it; the
extractor translates them into :mod:`meetup_data.extraction.models`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RawModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RawSpeaker(RawModel):
    name: str
    github_account: str | None = None


class RawSessionDetail(RawModel):
    title: str | None = None
    speaker: RawSpeaker | None = Field(default=None, alias="speakers")


class RawSession(RawModel):
    detail: RawSessionDetail | None = Field(default=None, alias="Session_id")


class RawLogo(RawModel):
    filename_disk: str


class RawSponsorDetail(RawModel):
    name: str = Field(alias="Name")
    logo: RawLogo | None = Field(default=None, alias="Logo")


class RawSponsor(RawModel):
    detail: RawSponsorDetail | None = Field(default=None, alias="Sponsor_id")


class RawMeetup(RawModel):
    id: int
    title: str | None = None
    date: str | None = Field(default=None, alias="Date")
    venue: str | None = Field(default=None, alias="Venue")
    location: str | None = Field(default=None, alias="Location")
    time: str | None = Field(default=None, alias="Time")
    sessions: list[RawSession] | None = None
    sponsors: list[RawSponsor] | None = None

"""Data models for the merged meetup data written to ``meetup-data.json``.

Attributes are snake_case in Python and camelCase on the wire; the slide
deck reads the camelCase JSON.  Extra keys are allowed so overrides and
configured extra speaker fields survive into the output.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ArtifactModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class MeetupInfo(ArtifactModel):
    """Meetup-level details shown on the title slides."""

    id: int
    title: str | None
    date: str | None
    venue: str | None
    location: str | None
    time: str | None


class Speaker(ArtifactModel):
    """A speaker extracted from a session, keyed by ``name`` for overrides."""

    name: str
    talk_title: str | None
    github_username: str | None
    github_avatar: str | None
    company: Any = None
    job_title: Any = None
    bio: Any = None


class Sponsor(ArtifactModel):
    name: str
    logo: str | None


class MeetupData(ArtifactModel):
    """The full artifact consumed by the presentation layer."""

    meetup: MeetupInfo
    speakers: list[Speaker]
    sponsor: Sponsor | None

    def to_json_dict(self) -> dict:  # type: ignore[type-arg]
        """Serialize with wire names, leaving never-set optional fields out."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

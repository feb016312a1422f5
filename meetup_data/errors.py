"""Error taxonomy for a fetch-meetup-data run."""

from __future__ import annotations


class MeetupDataError(Exception):
    """Base class for every error the tool reports to the user."""


class ConfigError(MeetupDataError):
    """The project configuration file is missing or malformed."""


class FetchError(MeetupDataError):
    """A remote collection could not be fetched or decoded."""

    def __init__(self, url: str, status_code: int | None = None, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = " ".join(p for p in (str(status_code) if status_code else "", reason) if p)
        super().__init__(f"Failed to fetch {url}: {detail or 'unknown error'}")


class NotFoundError(MeetupDataError):
    """The configured meetup id is absent from the fetched collection."""

    def __init__(self, meetup_id: str) -> None:
        self.meetup_id = meetup_id
        super().__init__(f"Meetup with id {meetup_id} not found")


class OverrideParseError(MeetupDataError):
    """The override file exists but is not a valid override document."""


class UpstreamDataError(MeetupDataError):
    """The matched upstream record does not have the expected shape."""

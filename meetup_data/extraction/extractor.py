"""Translate the upstream meetup export into :class:`MeetupData`.

Everything here is pure: given the raw collections and a meetup id, the
result depends on nothing else.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from meetup_data.errors import NotFoundError, UpstreamDataError
from meetup_data.extraction.models import MeetupData, MeetupInfo, Speaker, Sponsor
from meetup_data.remote.models import RawMeetup

logger = logging.getLogger(__name__)

GITHUB_AVATAR_URL = "https://github.com/{username}.png"


def github_avatar_url(username: str | None) -> str | None:
    """Return the GitHub avatar URL for ``username``, or None without one."""
    if not username:
        return None
    return GITHUB_AVATAR_URL.format(username=username)


def sponsor_logo_url(filename: str, base_url: str) -> str:
    return f"{base_url}{filename}"


def find_meetup(meetups: list[dict[str, Any]], meetup_id: str) -> RawMeetup:
    """Find the meetup whose numeric ``id`` equals ``meetup_id``.

    Only the matching record is validated, so malformed unrelated records
    in the export do not affect the run.

    Raises:
        NotFoundError: If no record carries that id.
        UpstreamDataError: If the matching record is malformed.
    """
    target = int(meetup_id)
    for record in meetups:
        if isinstance(record, dict) and record.get("id") == target:
            try:
                meetup = RawMeetup.model_validate(record)
            except ValidationError as exc:
                msg = f"Meetup {meetup_id} has an unexpected structure: {exc}"
                raise UpstreamDataError(msg) from exc
            logger.info('Found meetup: "%s"', meetup.title)
            return meetup
    raise NotFoundError(meetup_id)


def extract_speakers(meetup: RawMeetup) -> list[Speaker]:
    """One speaker per session that has a nested speaker, in session order."""
    speakers: list[Speaker] = []
    for session in meetup.sessions or []:
        if session.detail is None or session.detail.speaker is None:
            continue
        raw = session.detail.speaker
        username = raw.github_account or None
        speakers.append(
            Speaker(
                name=raw.name,
                talk_title=session.detail.title,
                github_username=username,
                github_avatar=github_avatar_url(username),
            )
        )

    logger.info("Found %d speaker(s)", len(speakers))
    for speaker in speakers:
        logger.info('  - %s: "%s"', speaker.name, speaker.talk_title)
    return speakers


def extract_sponsor(meetup: RawMeetup, logo_base_url: str) -> Sponsor | None:
    """Materialize the first listed sponsor, if any; later sponsors are ignored."""
    if not meetup.sponsors:
        return None
    detail = meetup.sponsors[0].detail
    if detail is None:
        return None

    logo = sponsor_logo_url(detail.logo.filename_disk, logo_base_url) if detail.logo else None
    logger.info("Sponsor: %s", detail.name)
    return Sponsor(name=detail.name, logo=logo)


def build_meetup_data(meetup: RawMeetup, logo_base_url: str) -> MeetupData:
    """Assemble the un-overridden :class:`MeetupData` for ``meetup``."""
    return MeetupData(
        meetup=MeetupInfo(
            id=meetup.id,
            title=meetup.title,
            date=meetup.date,
            venue=meetup.venue,
            location=meetup.location,
            time=meetup.time,
        ),
        speakers=extract_speakers(meetup),
        sponsor=extract_sponsor(meetup, logo_base_url),
    )

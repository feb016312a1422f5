"""Apply manual overrides on top of freshly extracted meetup data."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from meetup_data.extraction.models import MeetupData, Speaker
from meetup_data.overrides.models import OverrideDocument

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Legacy spellings accepted in speaker overrides, mapped to the canonical key.
SPEAKER_FIELD_ALIASES: dict[str, str] = {
    "jobtitle": "jobTitle",
}


def normalize_field_names(fields: dict[str, Any], aliases: dict[str, str] = SPEAKER_FIELD_ALIASES) -> dict[str, Any]:
    return {aliases.get(key, key): value for key, value in fields.items()}


def remove_nulls(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


def shallow_merge(target: ModelT, overrides: dict[str, Any]) -> ModelT:
    """Return a copy of ``target`` with ``overrides`` (wire names) laid over it.

    Keys naming a declared field replace that field; any other key is kept
    as an extra field.  Values are taken as-is, like a plain dict merge.
    """
    field_by_wire_name = {
        info.alias or name: name for name, info in type(target).model_fields.items()
    }
    update = {field_by_wire_name.get(key, key): value for key, value in overrides.items()}
    return target.model_copy(update=update)


def _merge_speaker(speaker: Speaker, overrides: dict[str, dict[str, Any] | None]) -> Speaker:
    override = overrides.get(speaker.name)
    if not override:
        return speaker

    valid = remove_nulls(normalize_field_names(override))
    if not valid:
        return speaker

    logger.info("  %s: %s", speaker.name, ", ".join(valid))
    return shallow_merge(speaker, valid)


def apply_overrides(data: MeetupData, overrides: OverrideDocument | None) -> MeetupData:
    """Merge ``overrides`` into ``data`` without mutating either.

    Null override values are skipped, so a freshly created scaffold leaves
    the data unchanged.  Speakers are matched by exact name.
    """
    if overrides is None:
        return data

    logger.info("Applying overrides...")
    meetup = data.meetup
    speakers = data.speakers
    sponsor = data.sponsor

    if overrides.meetup:
        valid = remove_nulls(overrides.meetup)
        if valid:
            logger.info("  Meetup overrides: %s", ", ".join(valid))
            meetup = shallow_merge(meetup, valid)

    if overrides.speakers:
        speakers = [_merge_speaker(speaker, overrides.speakers) for speaker in speakers]

    if overrides.sponsor and sponsor is not None:
        valid = remove_nulls(overrides.sponsor)
        if valid:
            logger.info("  Sponsor overrides: %s", ", ".join(valid))
            sponsor = shallow_merge(sponsor, valid)

    return data.model_copy(update={"meetup": meetup, "speakers": speakers, "sponsor": sponsor})

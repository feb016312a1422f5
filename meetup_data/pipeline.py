"""End-to-end run: config -> fetch -> extract -> overrides -> merge -> artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from meetup_data.artifacts.storage import Storage
from meetup_data.artifacts.writer import write_meetup_data, write_speaker_slides
from meetup_data.config import Settings
from meetup_data.extraction.extractor import build_meetup_data, find_meetup
from meetup_data.extraction.models import MeetupData
from meetup_data.overrides.merge import apply_overrides
from meetup_data.overrides.store import create_override_template, read_overrides
from meetup_data.project_config import read_project_config
from meetup_data.remote.fetcher import fetch_all

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """What a run produced."""

    data: MeetupData
    template_created: bool
    overrides_loaded: bool
    written_files: list[str] = field(default_factory=list)

    @property
    def sponsor_name(self) -> str | None:
        return self.data.sponsor.name if self.data.sponsor else None


def _log_summary(summary: RunSummary) -> None:
    rule = "=" * 50
    logger.info(rule)
    logger.info("Summary:")
    logger.info(rule)
    logger.info("Meetup: %s", summary.data.meetup.title)
    logger.info("Speakers: %d", len(summary.data.speakers))
    logger.info("Sponsor: %s", summary.sponsor_name or "None")
    logger.info(rule)


def run(
    settings: Settings,
    storage: Storage,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RunSummary:
    """Fetch, merge and write all meetup artifacts into ``storage``.

    Args:
        settings: URLs, limits and project-relative file paths.
        storage: Project directory the config is read from and artifacts
            are written to.
        transport: Optional httpx transport (tests use ``httpx.MockTransport``).

    Returns:
        A :class:`RunSummary` of the merged data and written files.
    """
    # 1. Project config (before any network call)
    config = read_project_config(storage, settings.config_file)

    # 2. Fetch
    collections = fetch_all(settings, transport=transport)

    # 3. Extract
    meetup = find_meetup(collections.meetups, config.meetup_id)
    data = build_meetup_data(meetup, settings.sponsor_logo_base_url)

    # 4. Overrides: scaffold first, then read
    template_created = create_override_template(
        storage,
        settings.override_file,
        [speaker.name for speaker in data.speakers],
        config.speaker_extra_fields,
    )
    overrides = read_overrides(storage, settings.override_file)
    merged = apply_overrides(data, overrides)

    # 5. Artifacts
    write_meetup_data(storage, settings.output_file, merged)
    written = [settings.output_file]
    written += write_speaker_slides(
        storage,
        settings.speakers_dir,
        settings.slide_references_file,
        merged.speakers,
    )

    summary = RunSummary(
        data=merged,
        template_created=template_created,
        overrides_loaded=overrides is not None,
        written_files=written,
    )
    _log_summary(summary)
    return summary

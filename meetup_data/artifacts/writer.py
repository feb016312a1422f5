"""Generated artifacts: the JSON data file and per-speaker slide fragments."""

from __future__ import annotations

import json
import logging

from meetup_data.artifacts.storage import Storage
from meetup_data.extraction.models import MeetupData, Speaker

logger = logging.getLogger(__name__)

SPEAKER_LAYOUT = "speaker-intro"


def write_meetup_data(storage: Storage, path: str, data: MeetupData) -> None:
    """Write ``data`` as pretty-printed JSON, replacing any previous file."""
    storage.write_text(path, json.dumps(data.to_json_dict(), indent=2, ensure_ascii=False))
    logger.info("Data saved to: %s", path)


def render_speaker_slide(speaker: Speaker) -> str:
    """Render the front matter for one speaker-intro slide.

    Optional values that are empty or missing are left out; the order of
    the remaining keys is fixed.
    """
    entries = [
        ("layout", SPEAKER_LAYOUT),
        ("image", speaker.github_avatar),
        ("name", speaker.name),
        ("talkTitle", speaker.talk_title),
        ("github", speaker.github_username),
        ("company", speaker.company),
        ("jobTitle", speaker.job_title),
    ]
    required = {"layout", "name", "talkTitle"}
    lines = [
        f"{key}: {'' if value is None else value}"
        for key, value in entries
        if key in required or value
    ]
    return "---\n" + "\n".join(lines) + "\n---\n"


def speaker_slide_name(index: int) -> str:
    """File name of the slide for the 1-based ``index``-th speaker."""
    return f"speaker-{index}.md"


def render_slide_references(count: int, speakers_dir: str) -> str:
    """Slide inclusion blocks for ``count`` speakers, ready to paste into slides.md."""
    blocks = [
        f"---\nsrc: ./{speakers_dir}/{speaker_slide_name(i)}\nhide: false\n---"
        for i in range(1, count + 1)
    ]
    return "\n\n".join(blocks)


def write_speaker_slides(
    storage: Storage,
    speakers_dir: str,
    references_path: str,
    speakers: list[Speaker],
) -> list[str]:
    """Write one slide per speaker plus the composite references file.

    Returns:
        Paths written, slides first, references file last.
    """
    logger.info("Generating speaker slides...")
    written: list[str] = []
    for index, speaker in enumerate(speakers, start=1):
        path = f"{speakers_dir}/{speaker_slide_name(index)}"
        storage.write_text(path, render_speaker_slide(speaker))
        written.append(path)
        logger.info("  Created %s for %s", speaker_slide_name(index), speaker.name)

    logger.info("Generated %d speaker slide(s)", len(speakers))

    storage.write_text(references_path, render_slide_references(len(speakers), speakers_dir))
    written.append(references_path)
    logger.info("Slide references saved to: %s", references_path)
    logger.info("  Copy and paste these into your slides.md file!")
    return written

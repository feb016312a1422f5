"""Project configuration: the meetup to build slides for and extra speaker fields.

The configuration lives in the slide deck's ``slides.config.ts``.  Only two
values are needed, so they are pulled out with patterns rather than a full
TypeScript parser.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from meetup_data.artifacts.storage import Storage
from meetup_data.errors import ConfigError

logger = logging.getLogger(__name__)

MEETUP_ID_RE = re.compile(r"""id:\s*['"](\d+)['"]""")
EXTRA_FIELDS_RE = re.compile(r"extraFields:\s*\[(.*?)\]", re.DOTALL)


@dataclass(frozen=True)
class ProjectConfig:
    """Values read from the project configuration file."""

    meetup_id: str
    speaker_extra_fields: list[str] = field(default_factory=list)


def _parse_extra_fields(body: str) -> list[str]:
    """Split a quoted-string list literal body into names (order and duplicates kept)."""
    names = (item.strip().replace("'", "").replace('"', "") for item in body.split(","))
    return [name for name in names if name]


def parse_project_config(content: str) -> ProjectConfig:
    """Extract the meetup id and speaker extra fields from config text.

    Raises:
        ConfigError: If no quoted numeric ``id`` is declared.
    """
    id_match = MEETUP_ID_RE.search(content)
    if not id_match:
        raise ConfigError("Could not find meetup id in project configuration")

    extra_match = EXTRA_FIELDS_RE.search(content)
    extra_fields = _parse_extra_fields(extra_match.group(1)) if extra_match else []

    return ProjectConfig(meetup_id=id_match.group(1), speaker_extra_fields=extra_fields)


def read_project_config(storage: Storage, path: str) -> ProjectConfig:
    """Read and parse the project configuration file at ``path``."""
    if not storage.exists(path):
        raise ConfigError(f"Project configuration not found: {path}")

    config = parse_project_config(storage.read_text(path))
    logger.info("Meetup ID: %s", config.meetup_id)
    logger.info("Speaker extra fields: %s", ", ".join(config.speaker_extra_fields) or "none")
    return config

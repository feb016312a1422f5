"""Override file handling: scaffold creation and tolerant reading."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from meetup_data.artifacts.storage import Storage
from meetup_data.errors import OverrideParseError
from meetup_data.overrides.models import OverrideDocument

logger = logging.getLogger(__name__)


def build_override_template(speaker_names: Iterable[str], extra_fields: Iterable[str]) -> dict[str, Any]:
    """Scaffold with one entry per speaker, each listing the extra fields as null."""
    speaker_template = {name: None for name in extra_fields}
    return {
        "meetup": {},
        "speakers": {name: dict(speaker_template) for name in speaker_names},
        "sponsor": {},
    }


def create_override_template(
    storage: Storage,
    path: str,
    speaker_names: Iterable[str],
    extra_fields: Iterable[str],
) -> bool:
    """Write the override scaffold to ``path`` unless a file is already there.

    An existing file is never touched, whatever it contains, so manual
    edits survive repeated runs.

    Returns:
        True if the scaffold was written.
    """
    if storage.exists(path):
        logger.info("Override file already exists, skipping template generation")
        return False

    extra_fields = list(extra_fields)
    template = build_override_template(speaker_names, extra_fields)
    storage.write_text(path, json.dumps(template, indent=2, ensure_ascii=False))
    logger.info("Created %s template", path)
    logger.info("  Extra fields from config: %s", ", ".join(extra_fields) or "none")
    logger.info("  Edit speaker fields to add overrides (set to null to keep original values)")
    return True


def parse_overrides(content: str) -> OverrideDocument:
    """Parse override file content.

    Raises:
        OverrideParseError: If the content is not JSON or not shaped like
            an override document.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise OverrideParseError(f"JSON syntax error: {exc}") from exc

    try:
        return OverrideDocument.model_validate(data)
    except ValidationError as exc:
        raise OverrideParseError(f"Unexpected override structure: {exc}") from exc


def read_overrides(storage: Storage, path: str) -> OverrideDocument | None:
    """Load overrides from ``path``.

    A missing file and an unparseable file both yield None; the latter is
    logged so the run can still publish the fetched data.
    """
    if not storage.exists(path):
        return None

    try:
        overrides = parse_overrides(storage.read_text(path))
    except OverrideParseError as exc:
        logger.error("Failed to parse override file %s: %s", path, exc)
        logger.error("  Please check for trailing commas, missing quotes, or other JSON syntax issues")
        logger.error("  Skipping overrides - fix the file and run again")
        return None

    logger.info("Loaded overrides from %s", path)
    return overrides

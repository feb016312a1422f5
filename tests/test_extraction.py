"""Tests for translating the upstream export into MeetupData (no network)."""

from __future__ import annotations

import json
import pathlib
from typing import Any

import pytest

from meetup_data.errors import NotFoundError, UpstreamDataError
from meetup_data.extraction.extractor import (
    build_meetup_data,
    extract_speakers,
    extract_sponsor,
    find_meetup,
    github_avatar_url,
)
from meetup_data.remote.models import RawMeetup

FIXTURE_PATH = pathlib.Path(__file__).parent / "fixtures" / "meetups-raw.json"
LOGO_BASE = "https://frontend.mu/assets/"


def _load_meetups() -> list[dict[str, Any]]:
    return json.loads(FIXTURE_PATH.read_text(encoding="utf-8"))


def _make_meetup(**overrides: Any) -> RawMeetup:
    """Create a RawMeetup from its upstream JSON shape with sensible defaults."""
    record: dict[str, Any] = {
        "id": 1,
        "title": "Test Meetup",
        "Date": "2025-01-01",
        "Venue": "Venue",
        "Location": "Location",
        "Time": "10:00",
        "sessions": [],
        "sponsors": [],
    }
    record.update(overrides)
    return RawMeetup.model_validate(record)


def _session(title: str, speaker: dict[str, Any] | None) -> dict[str, Any]:
    return {"id": 1, "Session_id": {"title": title, "speakers": speaker}}


class TestFindMeetup:
    def test_finds_by_numeric_id(self) -> None:
        meetup = find_meetup(_load_meetups(), "42")
        assert meetup.id == 42
        assert meetup.title == "Frontend Meetup October"
        assert meetup.date == "2025-10-18"
        assert meetup.venue == "Caudan Arts Centre"

    def test_missing_id_raises(self) -> None:
        with pytest.raises(NotFoundError, match="99"):
            find_meetup(_load_meetups(), "99")

    def test_string_ids_do_not_match(self) -> None:
        with pytest.raises(NotFoundError):
            find_meetup([{"id": "42", "title": "x"}], "42")

    def test_null_titles_pass_through(self) -> None:
        meetups = [
            {
                "id": 5,
                "title": None,
                "sessions": [{"Session_id": {"title": None, "speakers": {"name": "Jane"}}}],
            }
        ]
        data = build_meetup_data(find_meetup(meetups, "5"), LOGO_BASE)
        assert data.meetup.title is None
        assert data.speakers[0].name == "Jane"
        assert data.speakers[0].talk_title is None
        assert data.to_json_dict()["speakers"][0]["talkTitle"] is None

    @pytest.mark.parametrize(
        "record",
        [
            {"id": 5, "sessions": [{"Session_id": {"title": "Talk", "speakers": {"name": None}}}]},
            {"id": 5, "sponsors": [{"Sponsor_id": {"Name": "Acme", "Logo": {"filename_disk": None}}}]},
            {"id": 5, "sessions": "not-a-list"},
        ],
    )
    def test_malformed_matched_record_raises(self, record: dict[str, Any]) -> None:
        with pytest.raises(UpstreamDataError, match="Meetup 5 has an unexpected structure"):
            find_meetup([record], "5")

    def test_unrelated_malformed_records_are_ignored(self) -> None:
        meetups = [{"id": 1, "sessions": "not-a-list"}, {"id": 2, "title": "Good"}]
        assert find_meetup(meetups, "2").title == "Good"


class TestExtractSpeakers:
    def test_sessions_without_speaker_are_skipped(self) -> None:
        meetup = _make_meetup(
            sessions=[
                _session("Talk A", {"name": "A", "github_account": "a-dev"}),
                _session("Break", None),
                {"id": 3, "Session_id": None},
                _session("Talk B", {"name": "B"}),
            ]
        )
        speakers = extract_speakers(meetup)
        assert [s.name for s in speakers] == ["A", "B"]
        assert [s.talk_title for s in speakers] == ["Talk A", "Talk B"]

    def test_avatar_present_iff_username_present(self) -> None:
        meetup = _make_meetup(
            sessions=[
                _session("One", {"name": "A", "github_account": "a-dev"}),
                _session("Two", {"name": "B", "github_account": ""}),
                _session("Three", {"name": "C"}),
            ]
        )
        for speaker in extract_speakers(meetup):
            assert (speaker.github_avatar is None) == (speaker.github_username is None)
            if speaker.github_username:
                assert speaker.github_avatar == f"https://github.com/{speaker.github_username}.png"

    def test_missing_sessions_list(self) -> None:
        assert extract_speakers(_make_meetup(sessions=None)) == []

    def test_avatar_url_helper(self) -> None:
        assert github_avatar_url("octocat") == "https://github.com/octocat.png"
        assert github_avatar_url(None) is None
        assert github_avatar_url("") is None


class TestExtractSponsor:
    def test_empty_sponsor_list_yields_none(self) -> None:
        assert extract_sponsor(_make_meetup(sponsors=[]), LOGO_BASE) is None

    def test_absent_sponsor_list_yields_none(self) -> None:
        assert extract_sponsor(_make_meetup(sponsors=None), LOGO_BASE) is None

    def test_missing_nested_sponsor_yields_none(self) -> None:
        meetup = _make_meetup(sponsors=[{"id": 1, "Sponsor_id": None}])
        assert extract_sponsor(meetup, LOGO_BASE) is None

    def test_sponsor_without_logo(self) -> None:
        meetup = _make_meetup(sponsors=[{"id": 1, "Sponsor_id": {"Name": "Acme"}}])
        sponsor = extract_sponsor(meetup, LOGO_BASE)
        assert sponsor is not None
        assert sponsor.name == "Acme"
        assert sponsor.logo is None

    def test_logo_url_from_filename(self) -> None:
        meetup = _make_meetup(
            sponsors=[{"id": 1, "Sponsor_id": {"Name": "Acme", "Logo": {"filename_disk": "acme.png"}}}]
        )
        sponsor = extract_sponsor(meetup, LOGO_BASE)
        assert sponsor is not None
        assert sponsor.logo == "https://frontend.mu/assets/acme.png"

    def test_only_first_sponsor_is_used(self) -> None:
        meetup = _make_meetup(
            sponsors=[
                {"id": 1, "Sponsor_id": {"Name": "First"}},
                {"id": 2, "Sponsor_id": {"Name": "Second"}},
            ]
        )
        sponsor = extract_sponsor(meetup, LOGO_BASE)
        assert sponsor is not None
        assert sponsor.name == "First"


class TestBuildMeetupData:
    def test_fixture_scenario(self) -> None:
        """Meetup 42: one real speaker, one empty session, one logo-less sponsor."""
        data = build_meetup_data(find_meetup(_load_meetups(), "42"), LOGO_BASE)

        assert len(data.speakers) == 1
        jane = data.speakers[0]
        assert jane.name == "Jane"
        assert jane.github_username == "janedev"
        assert jane.github_avatar == "https://github.com/janedev.png"

        assert data.sponsor is not None
        assert data.sponsor.name == "Acme"
        assert data.sponsor.logo is None

    def test_wire_shape(self) -> None:
        data = build_meetup_data(find_meetup(_load_meetups(), "42"), LOGO_BASE)
        assert data.to_json_dict() == {
            "meetup": {
                "id": 42,
                "title": "Frontend Meetup October",
                "date": "2025-10-18",
                "venue": "Caudan Arts Centre",
                "location": "Port Louis",
                "time": "10:00",
            },
            "speakers": [
                {
                    "name": "Jane",
                    "talkTitle": "Building slides with Vue",
                    "githubUsername": "janedev",
                    "githubAvatar": "https://github.com/janedev.png",
                }
            ],
            "sponsor": {"name": "Acme", "logo": None},
        }

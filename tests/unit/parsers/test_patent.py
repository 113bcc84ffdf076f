"""
Unit tests for the patent interpreter.
"""

import pytest
from profilecore.models import Link
from profilecore.parsers.patent import PatentInterpreter, looks_like_patent_metadata, parse_patent_subtitle

REDIRECT = "https://www.linkedin.com/redir/redirect?url=https%3A%2F%2Fpatents.example.test%2Fabc&urlhash=Zz"


@pytest.fixture
def interpreter():
    return PatentInterpreter()


class TestPatentInterpreter:
    def test_parses_metadata_and_redirect_link(self, interpreter, make_record):
        """Issuer, number and date come from the metadata line; the URL is unwrapped."""
        record = make_record(
            [
                "Distributed Data Processing System",
                "US US10424882B2 · Issued Sep 24, 2019",
                "Improves distributed query execution.",
            ],
            links=[Link(url=REDIRECT, anchor_text="Show patent")],
        )

        parsed = interpreter.parse(record)

        assert parsed.title == "Distributed Data Processing System"
        assert parsed.issuer == "US"
        assert parsed.number == "US10424882B2"
        assert parsed.issued_date == "Sep 24, 2019"
        assert parsed.url == "https://patents.example.test/abc"
        assert parsed.description == "Improves distributed query execution."
        assert interpreter.interpret(record).confidence == pytest.approx(1.0)

    def test_every_metadata_line_is_excluded_from_description(self, interpreter, make_record):
        parsed = interpreter.parse(
            make_record(
                [
                    "Distributed Data Processing System",
                    "US US10424882B2 · Issued Sep 24, 2019",
                    "EP 1234567",
                    "Improves distributed query execution.",
                ]
            )
        )

        assert parsed.number == "US10424882B2"
        assert parsed.description == "Improves distributed query execution."

    def test_handles_mojibake_separator(self, interpreter, make_record):
        parsed = interpreter.parse(make_record(["Data System", "US US10424882B2 Â· Issued Sep 24, 2019"]))

        assert parsed.number == "US10424882B2"
        assert parsed.issued_date == "Sep 24, 2019"

    def test_noise_lines_are_not_description(self, interpreter, make_record):
        parsed = interpreter.parse(
            make_record(["Data System", "Issued Jan 2020", "Other inventors", "+3", "Speeds up joins."])
        )

        assert parsed.issued_date == "Jan 2020"
        assert parsed.description == "Speeds up joins."
        assert parsed.plain_text == "Data System\nIssued Jan 2020\nSpeeds up joins."

    def test_link_without_patent_hint_is_ignored(self, interpreter, make_record):
        record = make_record(["Data System"], links=[Link(url="https://example.test/profile", anchor_text="Alex")])
        assert interpreter.parse(record).url is None

    def test_fragment_links_are_ignored(self, interpreter, make_record):
        record = make_record(["Data System"], links=[Link(url="#patent", anchor_text="Show patent")])
        assert interpreter.parse(record).url is None

    @pytest.mark.parametrize(
        "texts",
        [
            ["Patents"],
            ["Patents", "Patents adds will appear here"],
            ["Nothing", "Patent adds will appear here."],
        ],
    )
    def test_empty_states_are_rejected(self, interpreter, make_record, texts):
        """The section heading alone or the empty-state hint is not a patent."""
        assert interpreter.parse(make_record(texts)) is None


class TestPatentMetadata:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("US US10424882B2 · Issued Sep 24, 2019", True),
            ("Issued Jan 2020", True),
            ("EP 1234567", True),
            ("US PENDING", False),
            ("Improves distributed query execution.", False),
        ],
    )
    def test_looks_like_patent_metadata(self, line, expected):
        assert looks_like_patent_metadata(line) is expected

    def test_subtitle_starting_with_issued(self):
        assert parse_patent_subtitle("Issued Sep 24, 2019") == (None, None, "Sep 24, 2019")

    def test_subtitle_without_office_code(self):
        assert parse_patent_subtitle("10424882 · Sep 24, 2019") == (None, "10424882", "Sep 24, 2019")

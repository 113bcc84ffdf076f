"""
Unit tests for the experience interpreter.
"""

import pytest
from profilecore.models import Experience, Link, Position
from profilecore.parsers.experience import ExperienceInterpreter


@pytest.fixture
def interpreter():
    return ExperienceInterpreter()


@pytest.fixture
def company_link():
    return Link(url="https://www.linkedin.com/company/example/", anchor_text="", is_external=False)


class TestSinglePosition:
    def test_parses_positional_lines(self, interpreter, make_record, company_link):
        """Title, company line, date range, location and description are read in order."""
        record = make_record(
            [
                "Senior Engineer",
                "Example Corp · Full-time",
                "Jan 2020 - Present · 4 yrs",
                "Austin, Texas, United States",
                "Built core platform systems.",
            ],
            links=[company_link],
        )

        parsed = interpreter.parse(record)

        assert parsed == Experience(
            company="Example Corp",
            positions=(
                Position(
                    title="Senior Engineer",
                    employment_type="Full-time",
                    from_date="Jan 2020",
                    to_date="Present",
                    duration="4 yrs",
                    location="Austin, Texas, United States",
                    description="Built core platform systems.",
                ),
            ),
            linkedin_url="https://www.linkedin.com/company/example/",
        )
        assert interpreter.validate(parsed)

    def test_fully_populated_entry_scores_full_confidence(self, interpreter, make_record, company_link):
        """Every optional field present means confidence 1.0."""
        record = make_record(
            [
                "Senior Engineer",
                "Example Corp · Full-time",
                "Jan 2020 - Present · 4 yrs",
                "Austin, Texas, United States",
                "Built core platform systems.",
            ],
            links=[company_link],
        )

        outcome = interpreter.interpret(record)

        assert outcome.ok
        assert outcome.confidence == pytest.approx(1.0)

    def test_company_without_employment_type(self, interpreter, make_record):
        """A company line without separator leaves employment type empty."""
        parsed = interpreter.parse(make_record(["Engineer", "Initech"]))

        assert parsed.company == "Initech"
        assert parsed.positions[0].employment_type is None
        assert parsed.linkedin_url is None

    def test_external_links_are_not_company_links(self, interpreter, make_record):
        record = make_record(
            ["Engineer", "Initech"],
            links=[Link(url="https://initech.example.test", is_external=True)],
        )
        assert interpreter.parse(record).linkedin_url is None

    def test_missing_company_is_rejected(self, interpreter, make_record):
        """Without a company line the record cannot be an experience."""
        outcome = interpreter.interpret(make_record(["Senior Engineer"]))

        assert not outcome.ok
        assert outcome.confidence == 0.0
        assert outcome.reason

    def test_bare_minimum_scores_baseline(self, interpreter, make_record):
        """Required fields alone score the 0.5 baseline."""
        outcome = interpreter.interpret(make_record(["Engineer", "Initech"]))
        assert outcome.confidence == pytest.approx(0.5)


class TestGroupedPositions:
    def test_parses_sub_items_as_positions(self, interpreter, make_record):
        """The top-level first line is the company; each sub-item is one position."""
        record = make_record(
            ["Example Corp"],
            sub_items=[make_record(["Staff Engineer", "Jan 2022 - Present · 2 yrs", "Remote"])],
        )

        parsed = interpreter.parse(record)

        assert parsed.company == "Example Corp"
        assert len(parsed.positions) == 1
        position = parsed.positions[0]
        assert position.title == "Staff Engineer"
        assert position.from_date == "Jan 2022"
        assert position.to_date == "Present"
        assert position.duration == "2 yrs"
        assert position.location == "Remote"
        assert interpreter.validate(parsed)

    def test_classifies_lines_by_pattern(self, interpreter, make_record):
        """Employment type, location and description are recognised in any order."""
        record = make_record(
            ["Example Corp", "Full-time · 6 yrs"],
            sub_items=[
                make_record(["Staff Engineer", "Full-time", "Jan 2022 - Present · 2 yrs", "Led the storage team."]),
                make_record(["Engineer", "Jan 2018 - Dec 2021 · 4 yrs", "Berlin, Germany"]),
            ],
        )

        parsed = interpreter.parse(record)

        assert [p.title for p in parsed.positions] == ["Staff Engineer", "Engineer"]
        assert parsed.positions[0].employment_type == "Full-time"
        assert parsed.positions[0].description == "Led the storage team."
        assert parsed.positions[1].location == "Berlin, Germany"
        assert parsed.positions[1].to_date == "Dec 2021"

    def test_confidence_averages_over_positions(self, interpreter, make_record):
        """Sparse positions lower the confidence of the whole entry."""
        rich = make_record(
            ["Example Corp"],
            sub_items=[
                make_record(["Staff Engineer", "Full-time", "Jan 2022 - Present · 2 yrs", "Remote", "Did things."])
            ],
        )
        sparse = make_record(["Example Corp"], sub_items=[make_record(["Staff Engineer"])])

        assert interpreter.interpret(rich).confidence > interpreter.interpret(sparse).confidence
        assert interpreter.interpret(sparse).confidence == pytest.approx(0.5)

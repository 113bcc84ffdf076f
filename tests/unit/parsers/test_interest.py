"""
Unit tests for the interest interpreter and tab mapping.
"""

import pytest
from profilecore.models import Link
from profilecore.parsers.interest import InterestInterpreter, map_interest_tab_to_category


@pytest.fixture
def interpreter():
    return InterestInterpreter()


def test_parses_interest_with_category_and_url(interpreter, make_record):
    record = make_record(
        ["Example Company"],
        links=[Link(url="https://www.linkedin.com/company/example")],
        context={"category": "company"},
    )

    parsed = interpreter.parse(record)

    assert parsed.name == "Example Company"
    assert parsed.category == "company"
    assert parsed.linkedin_url == "https://www.linkedin.com/company/example"
    assert parsed.plain_text == "Example Company"
    assert interpreter.validate(parsed)


def test_interest_without_link_is_rejected(interpreter, make_record):
    """Interests without a linked target are not valid."""
    outcome = interpreter.interpret(make_record(["Example Company"], context={"category": "company"}))

    assert not outcome.ok
    assert outcome.confidence == 0.0


def test_raw_tab_name_is_mapped(interpreter, make_record):
    record = make_record(
        ["Jane Influencer"],
        links=[Link(url="https://www.linkedin.com/in/jane")],
        context={"category": "Top Voices"},
    )
    assert interpreter.parse(record).category == "influencer"


@pytest.mark.parametrize(
    "tab,expected",
    [
        ("Companies", "company"),
        ("Groups", "group"),
        ("Schools", "school"),
        ("Newsletters", "newsletter"),
        ("Top Voices", "influencer"),
        ("Influencers", "influencer"),
        ("Podcasts", "podcasts"),
    ],
)
def test_map_interest_tab_to_category(tab, expected):
    assert map_interest_tab_to_category(tab) == expected

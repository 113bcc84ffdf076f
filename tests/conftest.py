"""
Shared test configuration for profilecore.

Provides HTML snapshots of profile pages, a static Page Driver over them and
small builders for extraction records.
"""

from typing import Iterable, Mapping, Optional, Sequence

import pytest
from profilecore.config import Config, ExtractionSettings, MonitoringConfig
from profilecore.drivers import SelectolaxPageDriver
from profilecore.models import ExtractionRecord, Link

PROFILE_URL = "https://www.linkedin.com/in/alex-doe/"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


def _make_record(
    texts: Sequence[str],
    links: Iterable[Link] = (),
    context: Optional[Mapping[str, str]] = None,
    sub_items: Iterable[ExtractionRecord] = (),
) -> ExtractionRecord:
    return ExtractionRecord(
        texts=tuple(texts),
        links=tuple(links),
        context=dict(context or {}),
        sub_items=tuple(sub_items),
    )


@pytest.fixture
def make_record():
    """Builder for extraction records: ``make_record(texts, links, context, sub_items)``."""
    return _make_record


# ============================================================================
# HTML snapshots
# ============================================================================

PROFILE_HTML = """
<html><body>
<main>
  <section class="artdeco-card" data-member-id="42">
    <h1><span aria-hidden="true">Alex Doe</span><span class="visually-hidden">Alex Doe</span></h1>
    <div><span aria-hidden="true">Founder</span></div>
    <div>
      <span aria-hidden="true">Austin, Texas, United States</span>
      <a id="top-card-text-details-contact-info" href="/in/alex-doe/overlay/contact-info/">Contact info</a>
    </div>
  </section>
  <section data-view-name="profile-card-about">
    <h2>About</h2>
    <p>Building resilient data systems.</p>
    <p>Mentoring teams.</p>
  </section>
  <section data-view-name="profile-card-experience">
    <ul>
      <li class="pvs-list__paged-list-item">
        <a href="https://www.linkedin.com/company/example/">logo</a>
        <span aria-hidden="true">Senior Engineer</span><span class="visually-hidden">Senior Engineer</span>
        <span aria-hidden="true">Example Corp · Full-time</span>
        <span aria-hidden="true">Jan 2020 - Present · 4 yrs</span>
        <span aria-hidden="true">Austin, Texas, United States</span>
        <span aria-hidden="true">Built core platform systems.</span>
      </li>
      <li class="pvs-list__paged-list-item">
        <a href="https://www.linkedin.com/company/initech/">logo</a>
        <span aria-hidden="true">Engineer</span>
        <span aria-hidden="true">Initech · Contract</span>
        <span aria-hidden="true">Mar 2016 - Dec 2019 · 3 yrs 10 mos</span>
        <span aria-hidden="true">Remote</span>
      </li>
      <li class="pvs-list__paged-list-item">
        <a href="https://www.linkedin.com/company/example/">logo</a>
        <span aria-hidden="true">Senior Engineer</span>
        <span aria-hidden="true">Example Corp · Full-time</span>
        <span aria-hidden="true">Jan 2020 - Present · 4 yrs</span>
      </li>
    </ul>
  </section>
  <section data-view-name="profile-card-education">
    <ul>
      <li class="pvs-list__paged-list-item">
        <a href="https://www.linkedin.com/school/state-u/">logo</a>
        <span aria-hidden="true">State University</span>
        <span aria-hidden="true">B.S. Computer Science</span>
        <span aria-hidden="true">2014 - 2018</span>
      </li>
    </ul>
  </section>
</main>
<dialog>
  <h2>Contact info</h2>
  <section>
    <h3>Profile</h3>
    <div><a href="https://www.linkedin.com/in/alex-doe">linkedin.com/in/alex-doe</a></div>
  </section>
  <section>
    <h3>Email</h3>
    <div><a href="mailto:alex@example.com">alex@example.com</a></div>
  </section>
  <section>
    <h3>Phone</h3>
    <ul><li><span>+1 (555) 123-4567</span> <span>(Mobile)</span></li></ul>
  </section>
</dialog>
</body></html>
"""

PATENTS_DETAILS_HTML = """
<html><body><main>
  <div class="pvs-list__container">
    <ul>
      <li class="pvs-list__paged-list-item">
        <span aria-hidden="true">Distributed Data Processing System</span>
        <span aria-hidden="true">US US10424882B2 Â· Issued Sep 24, 2019</span>
        <span aria-hidden="true">Improves distributed query execution.</span>
        <a href="https://www.linkedin.com/redir/redirect?url=https%3A%2F%2Fpatents.example.test%2Fabc">
          <span aria-hidden="true">Show patent</span>
        </a>
      </li>
    </ul>
  </div>
</main></body></html>
"""

INTERESTS_DETAILS_HTML = """
<html><body><main>
  <div role="tablist">
    <button role="tab">Companies</button>
    <button role="tab">Groups</button>
  </div>
  <div role="tabpanel">
    <ul>
      <li class="pvs-list__paged-list-item">
        <a href="https://www.linkedin.com/company/example/"><span aria-hidden="true">Example Company</span></a>
        <span aria-hidden="true">12,345 followers</span>
      </li>
    </ul>
  </div>
  <div role="tabpanel">
    <ul>
      <li class="pvs-list__paged-list-item">
        <a href="https://www.linkedin.com/groups/123/"><span aria-hidden="true">Data Engineers</span></a>
      </li>
    </ul>
  </div>
</main></body></html>
"""

CERTIFICATIONS_DETAILS_HTML = """
<html><body><main>
  <div class="pvs-list__container">
    <ul>
      <li class="pvs-list__paged-list-item">
        <span aria-hidden="true">AWS Certified Developer</span>
        <span aria-hidden="true">Issued by Amazon Web Services Â· Jan 2024</span>
        <span aria-hidden="true">Credential ID ABC-123</span>
        <a href="https://example.test/verify">Show credential</a>
      </li>
    </ul>
  </div>
</main></body></html>
"""

EMPTY_DETAILS_HTML = """
<html><body><main><h2>Nothing to see for now</h2></main></body></html>
"""


def details(path: str) -> str:
    return f"{PROFILE_URL}details/{path}/"


@pytest.fixture
def profile_pages():
    """URL to markup mapping for one complete offline profile."""
    pages = {PROFILE_URL: PROFILE_HTML}
    for path in ("experience", "education", "honors", "publications", "courses", "projects", "languages"):
        pages[details(path)] = EMPTY_DETAILS_HTML
    pages[details("organizations")] = EMPTY_DETAILS_HTML
    pages[details("patents")] = PATENTS_DETAILS_HTML
    pages[details("interests")] = INTERESTS_DETAILS_HTML
    pages[details("certifications")] = CERTIFICATIONS_DETAILS_HTML
    return pages


@pytest.fixture
def profile_driver(profile_pages):
    """Static Page Driver positioned on the main profile page."""
    return SelectolaxPageDriver(PROFILE_HTML, url=PROFILE_URL, pages=profile_pages)


@pytest.fixture
def test_config():
    """Default configuration with metrics recording disabled."""
    return Config(
        extraction=ExtractionSettings(strategy_timeout_seconds=5.0),
        monitoring=MonitoringConfig(metrics_enabled=False),
    )


@pytest.fixture
def profile_url():
    return PROFILE_URL

"""Name-keyed dispatch table of interpreters."""

from __future__ import annotations

from typing import Callable, Dict

from ..exceptions import ConfigurationError
from .about import AboutInterpreter
from .accomplishment import AccomplishmentInterpreter
from .base import BaseInterpreter
from .contact import ContactInterpreter
from .education import EducationInterpreter
from .experience import ExperienceInterpreter
from .interest import InterestInterpreter
from .patent import PatentInterpreter
from .top_card import TopCardInterpreter

# Keyed by section name.
INTERPRETERS: Dict[str, Callable[[], BaseInterpreter]] = {
    "top_card": TopCardInterpreter,
    "about": AboutInterpreter,
    "experience": ExperienceInterpreter,
    "education": EducationInterpreter,
    "patents": PatentInterpreter,
    "accomplishments": AccomplishmentInterpreter,
    "interests": InterestInterpreter,
    "contact": ContactInterpreter,
}


def get_interpreter(section: str) -> BaseInterpreter:
    try:
        factory = INTERPRETERS[section]
    except KeyError:
        raise ConfigurationError(f"No interpreter for section '{section}'. Available: {sorted(INTERPRETERS)}")
    return factory()

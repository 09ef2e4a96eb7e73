"""
Shared pytest fixtures for dinersim tests.
"""

import itertools
import logging
from pathlib import Path

import pytest

from dinersim import DiningTime, Party, Person, SequenceRandomizer


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Returns the root test_output directory. Created once per test session.
    Files here persist after tests complete for easy access.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Returns a directory for the current test to write output files.
    Directory structure: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_name = request.node.name

    test_dir = test_output_root / module_name / test_name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture
def make_person():
    """Factory for people with an exact dining duration.

    ``make_person(30)`` returns a Person whose actual_dining_time is 30.
    Ids are unique within a test.
    """
    ids = itertools.count(1)

    def _make(dining: float = 30.0, name: str | None = None) -> Person:
        person_id = next(ids)
        return Person(
            id=person_id,
            name=name or f"P{person_id}",
            age=30,
            dining_time=DiningTime(dining, dining),
            randomizer=SequenceRandomizer([0.0]),
        )

    return _make


@pytest.fixture
def make_party(make_person):
    """Factory for parties: ``make_party(30, 50)`` is a party of two with those durations."""

    def _make(*dining_times: float) -> Party:
        return Party(make_person(d) for d in dining_times)

    return _make


@pytest.fixture(autouse=True)
def reset_dinersim_logging():
    """Reset logging state before and after each test.

    Removes all handlers except a NullHandler and resets the level so
    logging configuration from one test cannot leak into another.
    """
    logger = logging.getLogger("dinersim")

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)

    yield

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if not isinstance(handler, logging.NullHandler):
            handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)

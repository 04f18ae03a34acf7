"""Shared fixtures for poster tests."""

import pytest
from tests.conftest import make_result


@pytest.fixture
def winner():
    return make_result("Team Alpha", 1, "Tech Quiz", result_id="r1")


@pytest.fixture
def fourth_place():
    return make_result("Team Delta", 4, "Battle of Bands", result_id="r6")

import pytest

from linacc import seed_from_text


@pytest.fixture
def seed() -> bytes:
    return seed_from_text("test-seed")


@pytest.fixture
def other_seed() -> bytes:
    return seed_from_text("other-seed")

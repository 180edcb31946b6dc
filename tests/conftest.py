"""Shared fixtures for BaseInt tests."""

import pytest

from baseint.core.alphabets import ALPHABETS, BASE62
from baseint.core.codec import BaseInt

# Example UUID b9b03417-a52a-47cf-8638-3c26b2628c98 as an integer
EXAMPLE_UUID = "b9b03417-a52a-47cf-8638-3c26b2628c98"
EXAMPLE_UUID_INT = 246822080025974834485881087518675471512
EXAMPLE_ENCODED = "FoYGiVxbLcGdqtB3H0Qzbi"

SAMPLE_VALUES = [
    0,
    1,
    2,
    10,
    15,
    16,
    31,
    255,
    256,
    1234567890,
    9876543210,
    2**53 - 1,
    2**53,
    EXAMPLE_UUID_INT,
    2**128 - 1,
    2**128,
]


@pytest.fixture
def base62():
    return BaseInt(BASE62)


@pytest.fixture(params=sorted(ALPHABETS))
def codec(request):
    """A codec for each registered alphabet."""
    return BaseInt(ALPHABETS[request.param])

"""This file is loaded by pytest automatically. Fixtures defined here are available to all tests in the folder.

https://docs.pytest.org/en/7.1.x/reference/fixtures.html#conftest-py-sharing-fixtures-across-multiple-files
"""

import os
import sys

import pytest

# Allows running the tests without installing the package.
sys.path.insert(0, os.path.realpath(os.path.join(os.path.dirname(__file__), '../src/')))
from gobbledygook.samples import SAMPLES, Sample


@pytest.fixture(params=SAMPLES, ids=lambda sample: sample.source[:24])
def sample(request: pytest.FixtureRequest) -> Sample:
    """Fixture to test each known-good translation."""
    return request.param

import os
import sys
from glob import glob
from typing import List

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest  # noqa: E402

from calculator import Environment  # noqa: E402
from tests.test_util import DATA_DIR, open_file  # noqa: E402


@pytest.fixture
def environment() -> Environment:
    return Environment()


@pytest.fixture(scope="session")
def precedence_program() -> str:
    return open_file(os.path.join(DATA_DIR, "valid", "precedence.calc"))


def valid_files() -> List[str]:
    return sorted(glob(os.path.join(DATA_DIR, "valid", "*.calc")))


def invalid_files() -> List[str]:
    return sorted(glob(os.path.join(DATA_DIR, "invalid", "*.calc")))


@pytest.fixture(scope="session", params=valid_files(), ids=os.path.basename)
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=invalid_files(), ids=os.path.basename)
def invalid_file(request) -> str:
    return request.param

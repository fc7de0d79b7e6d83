import sys

import pytest

# CPython's default cap on int <-> decimal string conversion
DEFAULT_INT_MAX_STR_DIGITS = 4300


@pytest.fixture
def int_str_limit():
    """Restore the interpreter-wide int/str digit cap after the test."""
    saved = sys.get_int_max_str_digits()
    yield
    sys.set_int_max_str_digits(saved)


@pytest.fixture
def default_int_str_limit(int_str_limit):
    sys.set_int_max_str_digits(DEFAULT_INT_MAX_STR_DIGITS)

import pytest

from xmlop import ValidationOptions


@pytest.fixture(autouse=True)
def _reset_validation_options():
    ValidationOptions.reset_defaults()
    yield
    ValidationOptions.reset_defaults()

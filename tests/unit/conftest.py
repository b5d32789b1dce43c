import pytest
import floatcmp


@pytest.fixture
def default_logging():
    """Restore the default logging configuration after the test."""
    yield
    floatcmp.configure()

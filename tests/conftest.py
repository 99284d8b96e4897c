#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from xbytes.conf import ByteSizeConf


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def saturate(monkeypatch):
    """Switch the overflow policy to saturation for one test."""
    monkeypatch.setattr(ByteSizeConf, "OVERFLOW", "saturate")


@pytest.fixture
def strict(monkeypatch):
    """Pin the overflow policy to raising, whatever the environment selects."""
    monkeypatch.setattr(ByteSizeConf, "OVERFLOW", "raise")


@pytest.fixture
def lossless(monkeypatch):
    """Switch to the exact Fraction backend for one test."""
    monkeypatch.setattr(ByteSizeConf, "LOSSLESS", True)


@pytest.fixture
def lossy(monkeypatch):
    """Pin the float backend, whatever the environment selects."""
    monkeypatch.setattr(ByteSizeConf, "LOSSLESS", False)

import pytest

from saw import RecordingEffectHandler, Saw


@pytest.fixture
def recorder():
    """Effect handler that records instead of exiting or raising."""
    return RecordingEffectHandler()


@pytest.fixture
def saw(recorder):
    """Logger wired to the recording effect handler."""
    return Saw(effects=recorder)

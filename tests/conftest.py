"""Global pytest fixtures for UTF8KIT."""

import pytest

from utf8kit.config import HASH_LENGTH_ENV, TRANSLITERATE_ENV
from utf8kit.engine import splitter, validator

# pylint: disable=redefined-outer-name


@pytest.fixture
def automaton_only(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable the native codec fast path so every call runs the byte automaton."""
    monkeypatch.setattr(splitter, "native_codec_support", lambda: False)
    monkeypatch.setattr(validator, "native_codec_support", lambda: False)


@pytest.fixture(params=["native", "automaton"])
def engine_path(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> str:
    """Run a test once with the fast path and once with the automaton only."""
    if request.param == "automaton":
        monkeypatch.setattr(splitter, "native_codec_support", lambda: False)
        monkeypatch.setattr(validator, "native_codec_support", lambda: False)
    return request.param


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without the UTF8KIT_* overrides of the outer shell."""
    monkeypatch.delenv(TRANSLITERATE_ENV, raising=False)
    monkeypatch.delenv(HASH_LENGTH_ENV, raising=False)

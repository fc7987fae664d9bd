"""Tests for configuration and logging."""

import dataclasses
import logging
from collections.abc import Iterator

import pytest

import pyolazy as pl
from tests._producers import TrackedSource


@pytest.fixture
def config() -> Iterator[pl.Config]:
    previous = pl.get_config()
    yield previous
    pl.set_config(**dataclasses.asdict(previous))


def a_very_long_producer_name() -> Iterator[int]:
    yield 1


def test_set_config_returns_previous(config: pl.Config) -> None:
    """Test set_config returns the configuration it replaced."""
    previous = pl.set_config(repr_max_chars=5)
    assert previous is config
    assert pl.get_config().repr_max_chars == 5


def test_repr_truncated(config: pl.Config) -> None:  # noqa: ARG001
    """Test Enumerator repr honors repr_max_chars."""
    pl.set_config(repr_max_chars=8)
    assert repr(pl.Enumerator(a_very_long_producer_name)) == "Enumerator(a_ver...)"


def test_trace_drives(config: pl.Config, caplog: pytest.LogCaptureFixture) -> None:  # noqa: ARG001
    """Test drives and early releases are logged when tracing."""
    pl.set_config(trace_drives=True)
    caplog.set_level(logging.DEBUG, logger="pyolazy")
    TrackedSource("abc").take(1).collect()
    messages = [record.getMessage() for record in caplog.records]
    assert "driving TrackedSource" in messages
    assert "releasing TrackedIterator" in messages


def test_trace_skips_exhausted_generators(config: pl.Config, caplog: pytest.LogCaptureFixture) -> None:  # noqa: ARG001
    """Test running a generator to completion logs the drive but no release."""
    pl.set_config(trace_drives=True)
    caplog.set_level(logging.DEBUG, logger="pyolazy")

    def _letters() -> Iterator[str]:
        yield from "abc"

    pl.Enumerator(_letters).collect()
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["driving Enumerator"]

    caplog.clear()
    pl.Enumerator(_letters).find(lambda v, _: v == "a")
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("releasing") for message in messages)


def test_no_trace_by_default(config: pl.Config, caplog: pytest.LogCaptureFixture) -> None:  # noqa: ARG001
    """Test nothing is logged for drives when tracing is off."""
    pl.set_config(trace_drives=False)
    caplog.set_level(logging.DEBUG, logger="pyolazy")
    pl.Range(3).take(1).collect()
    assert caplog.records == []


def test_not_enumerable_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test the NotEnumerableError message is logged before raising."""
    caplog.set_level(logging.DEBUG, logger="pyolazy")
    with pytest.raises(pl.NotEnumerableError):
        pl.Enumerator(3.5).collect()  # type: ignore[arg-type]
    assert any("not enumerable" in record.getMessage() for record in caplog.records)


def test_setup_logger() -> None:
    """Test setup_logger attaches a single stdout handler."""
    configured = pl.setup_logger("pyolazy-test", level="debug")
    again = pl.setup_logger("pyolazy-test", level="debug")
    assert configured is again
    assert configured.level == logging.DEBUG
    assert len(configured.handlers) == 1
    assert not configured.propagate

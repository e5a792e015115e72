from __future__ import annotations

import dataclasses
from unittest.mock import Mock, patch

import pytest

from aretry.callbacks import (
    AttemptInfo,
    CallbackConfig,
    CallbackManager,
    ResolutionInfo,
    RetryInfo,
)
from aretry.outcome import AttemptOutcome


@pytest.fixture
def failure() -> AttemptOutcome:
    return AttemptOutcome.from_error(2, ValueError("bad"))


####################################
#     Tests for CallbackConfig     #
####################################


def test_callback_config_defaults() -> None:
    config = CallbackConfig()
    assert config.on_attempt is None
    assert config.on_retry is None
    assert config.on_resolved is None
    assert config.on_exhausted is None


def test_info_objects_are_frozen(failure: AttemptOutcome) -> None:
    info = AttemptInfo(
        operation_name=None, attempt=1, max_retries=0, outcome=failure, retry=False
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.attempt = 2  # type: ignore[misc]


#####################################
#     Tests for CallbackManager     #
#####################################


def test_callback_manager_without_callbacks(failure: AttemptOutcome) -> None:
    manager = CallbackManager()
    assert manager.callbacks == CallbackConfig()
    manager.on_attempt(failure, retry=True)
    manager.on_retry(1, 10, failure)
    manager.on_resolved(failure, start_time=0.0)
    manager.on_exhausted(failure, start_time=0.0)


def test_callback_manager_on_attempt(failure: AttemptOutcome) -> None:
    callback = Mock()
    manager = CallbackManager(
        CallbackConfig(on_attempt=callback), operation_name="fetch", max_retries=3
    )
    manager.on_attempt(failure, retry=True)
    callback.assert_called_once_with(
        AttemptInfo(
            operation_name="fetch", attempt=2, max_retries=3, outcome=failure, retry=True
        )
    )


def test_callback_manager_on_retry_with_error(failure: AttemptOutcome) -> None:
    callback = Mock()
    manager = CallbackManager(CallbackConfig(on_retry=callback), max_retries=5)
    manager.on_retry(2, 150, failure)
    callback.assert_called_once_with(
        RetryInfo(
            operation_name=None,
            attempt=2,
            max_retries=5,
            delay_ms=150,
            error=failure.error,
            result=None,
        )
    )


def test_callback_manager_on_retry_with_result() -> None:
    callback = Mock()
    manager = CallbackManager(CallbackConfig(on_retry=callback), max_retries=1)
    manager.on_retry(1, 0, AttemptOutcome.from_result(1, "partial"))
    info = callback.call_args.args[0]
    assert info.error is None
    assert info.result == "partial"


def test_callback_manager_on_resolved(failure: AttemptOutcome) -> None:
    callback = Mock()
    manager = CallbackManager(
        CallbackConfig(on_resolved=callback), operation_name="op", max_retries=2
    )
    with patch("aretry.callbacks.time.monotonic", return_value=12.5):
        manager.on_resolved(failure, start_time=10.0)
    callback.assert_called_once_with(
        ResolutionInfo(
            operation_name="op", attempts=2, max_retries=2, outcome=failure, total_time=2.5
        )
    )


def test_callback_manager_on_exhausted(failure: AttemptOutcome) -> None:
    on_exhausted, on_resolved = Mock(), Mock()
    manager = CallbackManager(
        CallbackConfig(on_resolved=on_resolved, on_exhausted=on_exhausted), max_retries=1
    )
    with patch("aretry.callbacks.time.monotonic", return_value=4.0):
        manager.on_exhausted(failure, start_time=1.0)
    info = on_exhausted.call_args.args[0]
    assert info.attempts == 2
    assert info.total_time == 3.0
    assert info.outcome is failure
    on_resolved.assert_not_called()


def test_callback_manager_callback_error_propagates(failure: AttemptOutcome) -> None:
    manager = CallbackManager(CallbackConfig(on_attempt=Mock(side_effect=RuntimeError("boom"))))
    with pytest.raises(RuntimeError, match=r"boom"):
        manager.on_attempt(failure, retry=False)

r"""Unit tests for RetryConfig and its construction helpers."""

from __future__ import annotations

import dataclasses

import pytest
from coola.equality import objects_are_equal

from aretry import delay
from aretry.conditions import always, on_any_error, on_null_result
from aretry.config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_THROW_EXHAUSTION_ERROR,
    RetryConfig,
    default_config,
    resolve_config,
)
from aretry.delay import NoDelay

#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    """Test that RetryConfig uses the documented default values."""
    config = RetryConfig(retry_when=on_any_error)

    assert config.retry_when is on_any_error
    assert config.max_retries == DEFAULT_MAX_RETRIES == 0
    assert isinstance(config.delay, NoDelay)
    assert config.throw_exhaustion_error is DEFAULT_THROW_EXHAUSTION_ERROR is False
    assert config.operation_name is None
    assert config.max_attempts == 1


@pytest.mark.parametrize("max_retries", [0, 1, 5, 100])
def test_retry_config_max_retries(max_retries: int) -> None:
    config = RetryConfig(retry_when=always, max_retries=max_retries)
    assert config.max_retries == max_retries
    assert config.max_attempts == max_retries + 1


def test_retry_config_is_frozen() -> None:
    config = RetryConfig(retry_when=always)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_retries = 3  # type: ignore[misc]


def test_retry_config_negative_max_retries() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 0, got -1"):
        RetryConfig(retry_when=always, max_retries=-1)


@pytest.mark.parametrize("max_retries", [1.5, "3", True])
def test_retry_config_invalid_max_retries_type(max_retries: object) -> None:
    with pytest.raises(TypeError, match=r"max_retries must be an int"):
        RetryConfig(retry_when=always, max_retries=max_retries)  # type: ignore[arg-type]


def test_retry_config_retry_when_not_callable() -> None:
    with pytest.raises(TypeError, match=r"retry_when must be callable"):
        RetryConfig(retry_when=True)  # type: ignore[arg-type]


def test_retry_config_delay_not_callable() -> None:
    with pytest.raises(TypeError, match=r"delay must be callable"):
        RetryConfig(retry_when=always, delay=100)  # type: ignore[arg-type]


def test_retry_config_none_delay_means_no_delay() -> None:
    config = RetryConfig(retry_when=always, delay=None)  # type: ignore[arg-type]
    assert isinstance(config.delay, NoDelay)
    assert config == default_config(always, delay=None)


def test_retry_config_accepts_plain_function_delay() -> None:
    def custom(attempts: int, error: BaseException | None) -> int:
        return 7 * attempts

    config = RetryConfig(retry_when=always, delay=custom)
    assert config.delay(3, None) == 21


def test_retry_config_merge() -> None:
    config = RetryConfig(retry_when=on_any_error, max_retries=3)
    merged = config.merge(max_retries=5, operation_name="fetch")
    assert merged.max_retries == 5
    assert merged.operation_name == "fetch"
    assert merged.retry_when is on_any_error
    # Original unchanged
    assert config.max_retries == 3
    assert config.operation_name is None


def test_retry_config_merge_ignores_none() -> None:
    config = RetryConfig(retry_when=on_any_error, max_retries=3, operation_name="op")
    assert config.merge(max_retries=None, operation_name=None) is config


def test_retry_config_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"max_retries must be >= 0"):
        RetryConfig(retry_when=always).merge(max_retries=-2)


def test_retry_config_to_dict() -> None:
    strategy = delay.linear(10)
    config = RetryConfig(
        retry_when=on_null_result,
        max_retries=2,
        delay=strategy,
        throw_exhaustion_error=True,
        operation_name="load",
    )
    assert objects_are_equal(
        config.to_dict(),
        {
            "retry_when": on_null_result,
            "max_retries": 2,
            "delay": strategy,
            "throw_exhaustion_error": True,
            "operation_name": "load",
        },
    )


def test_retry_config_equality() -> None:
    assert RetryConfig(retry_when=always, delay=delay.constant(5)) == RetryConfig(
        retry_when=always, delay=delay.constant(5)
    )


####################################
#     Tests for default_config     #
####################################


def test_default_config() -> None:
    assert default_config(on_any_error) == RetryConfig(retry_when=on_any_error)


def test_default_config_with_overrides() -> None:
    config = default_config(on_any_error, max_retries=4, throw_exhaustion_error=True)
    assert config.max_retries == 4
    assert config.throw_exhaustion_error
    assert isinstance(config.delay, NoDelay)


####################################
#     Tests for resolve_config     #
####################################


def test_resolve_config_from_retry_when() -> None:
    config = resolve_config(retry_when=always, max_retries=2)
    assert config == RetryConfig(retry_when=always, max_retries=2)


def test_resolve_config_overrides_config() -> None:
    base = RetryConfig(retry_when=on_any_error, max_retries=1)
    config = resolve_config(base, retry_when=always, max_retries=3)
    assert config.retry_when is always
    assert config.max_retries == 3


def test_resolve_config_returns_config_unchanged() -> None:
    base = RetryConfig(retry_when=on_any_error)
    assert resolve_config(base) is base


def test_resolve_config_requires_condition() -> None:
    with pytest.raises(ValueError, match=r"either a config or a retry_when condition"):
        resolve_config(max_retries=3)

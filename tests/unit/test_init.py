r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import pytest

import aretry


def test_package_version() -> None:
    assert isinstance(aretry.__version__, str)
    assert "." in aretry.__version__


def test_all_exports_defined() -> None:
    for name in aretry.__all__:
        assert hasattr(aretry, name), f"{name} is in __all__ but not defined in module"


@pytest.mark.parametrize(
    "name",
    ["RetryConfig", "RetryExecutor", "RetryExhaustedError", "execute", "retry", "with_retry"],
)
def test_public_api(name: str) -> None:
    assert name in aretry.__all__


def test_default_max_retries() -> None:
    assert aretry.DEFAULT_MAX_RETRIES == 0


def test_submodules() -> None:
    assert callable(aretry.conditions.on_any_error)
    assert callable(aretry.delay.linear)

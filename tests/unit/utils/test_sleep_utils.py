from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import pytest

from aretry import delay
from aretry.utils.sleep import calculate_delay_ms, sleep_ms

########################################
#     Tests for calculate_delay_ms     #
########################################


def test_calculate_delay_ms_forwards_arguments() -> None:
    strategy = Mock(return_value=40)
    error = OSError()
    assert calculate_delay_ms(strategy, 3, error) == 40
    strategy.assert_called_once_with(3, error)


def test_calculate_delay_ms_default_error() -> None:
    strategy = Mock(return_value=0)
    calculate_delay_ms(strategy, 1)
    strategy.assert_called_once_with(1, None)


@pytest.mark.parametrize(("attempts", "expected"), [(1, 100), (2, 200), (5, 500)])
def test_calculate_delay_ms_linear(attempts: int, expected: int) -> None:
    assert calculate_delay_ms(delay.linear(100), attempts) == expected


@pytest.mark.parametrize("value", [-1, -1000, -0.5])
def test_calculate_delay_ms_clamps_negative(value: float) -> None:
    assert calculate_delay_ms(lambda attempts, error: value, 1) == 0


def test_calculate_delay_ms_keeps_float() -> None:
    assert calculate_delay_ms(lambda attempts, error: 12.5, 1) == 12.5


##############################
#     Tests for sleep_ms     #
##############################


@pytest.mark.asyncio
async def test_sleep_ms_converts_to_seconds(mock_asleep: AsyncMock) -> None:
    await sleep_ms(1500)
    mock_asleep.assert_awaited_once_with(1.5)


@pytest.mark.asyncio
@pytest.mark.parametrize("delay_ms", [0, -10])
async def test_sleep_ms_skips_non_positive(mock_asleep: AsyncMock, delay_ms: float) -> None:
    await sleep_ms(delay_ms)
    mock_asleep.assert_not_called()

import math

import numpy as np
import pytest

from frame_hanger import (
    LayoutRejected,
    LayoutRequest,
    LayoutResult,
    Rejection,
    RejectionReason,
    check_layout,
    solve,
    solve_or_raise,
)


def request(**overrides):
    values = dict(
        wall_width=100.0,
        wall_height=80.0,
        picture_width=20.0,
        picture_height=15.0,
        quantity=3,
        hanging_height=60.0,
    )
    values.update(overrides)
    return LayoutRequest.from_values(**values)


def test_three_pictures_on_hundred_inch_wall():
    result = solve(request())

    assert isinstance(result, LayoutResult)
    assert result.gap == 10
    assert list(result.picture_centers) == [20, 50, 80]
    assert result.vertical_offsets == [0.0, 0.0, 0.0]
    assert result.request.hanging_height == 60.0


def test_single_picture_is_centered():
    result = solve(request(wall_width=73.5, picture_width=12.25, quantity=1))

    assert math.isclose(result.picture_centers[0], 73.5 / 2, rel_tol=1e-12)


@pytest.mark.parametrize(
    'wall_width, picture_width, quantity',
    [(100.0, 20.0, 3), (96.0, 11.5, 7), (250.0, 0.75, 40), (10.0, 3.3333, 3), (12.0, 1.0, 1)],
)
def test_width_budget_and_even_spacing(wall_width, picture_width, quantity):
    result = solve(request(wall_width=wall_width, picture_width=picture_width, quantity=quantity))

    used = picture_width * quantity + result.gap * (quantity + 1)
    assert math.isclose(used, wall_width, abs_tol=1e-9)
    assert len(result.picture_centers) == quantity
    steps = np.diff(result.picture_centers)
    assert np.all(steps > 0)
    assert np.allclose(steps, picture_width + result.gap, atol=1e-9)
    check_layout(result)


def test_zero_gap_is_accepted():
    result = solve(request(wall_width=60.0, picture_width=20.0, quantity=3))

    assert isinstance(result, LayoutResult)
    assert result.gap == 0
    assert list(result.picture_centers) == [10, 30, 50]


def test_overflow_is_rejected():
    outcome = solve(request(wall_width=50.0, picture_width=20.0, quantity=3))

    assert isinstance(outcome, Rejection)
    assert outcome.reason is RejectionReason.OVERFLOW
    assert 'too wide' in outcome.message


def test_hanging_above_wall_is_invalid_input():
    outcome = solve(request(hanging_height=80.5))

    assert isinstance(outcome, Rejection)
    assert outcome.reason is RejectionReason.INVALID_INPUT
    assert 'hanging_height' in outcome.detail


def test_invalid_input_wins_over_overflow():
    outcome = solve(request(wall_width=10.0, picture_width=-5.0))

    assert outcome.reason is RejectionReason.INVALID_INPUT


def test_solve_or_raise_carries_rejection():
    with pytest.raises(LayoutRejected) as exc:
        solve_or_raise(request(quantity=10))

    assert exc.value.reason is RejectionReason.OVERFLOW
    assert str(exc.value) == exc.value.rejection.message


def test_check_layout_flags_broken_result():
    good = solve(request())
    broken = LayoutResult(good.request, gap=11.0, picture_centers=good.picture_centers)

    with pytest.raises(AssertionError):
        check_layout(broken)


def test_solve_logs_call_at_debug(caplog):
    caplog.set_level('DEBUG', logger='frame_hanger.solver')

    solve(request())

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith('Entering solve') for m in messages)
    assert any(m.startswith('Exiting solve -> LayoutResult(') for m in messages)

import pytest

from frame_hanger import LayoutResult, LayoutSession, Rejection, RejectionReason


def calculate(session, **overrides):
    values = dict(
        wall_width=100,
        wall_height=80,
        picture_width=20,
        picture_height=15,
        quantity=3,
        hanging_height=60,
    )
    values.update(overrides)
    return session.calculate(**values)


def test_calculate_stores_layout():
    session = LayoutSession()

    result = calculate(session)

    assert isinstance(result, LayoutResult)
    assert session.result is result
    assert session.request.quantity == 3


def test_rejection_keeps_previous_layout():
    session = LayoutSession()
    first = calculate(session)
    first.commit_offsets([1.0, 2.0, 3.0])

    outcome = calculate(session, quantity=9)

    assert isinstance(outcome, Rejection)
    assert outcome.reason is RejectionReason.OVERFLOW
    assert session.result is first
    assert session.result.vertical_offsets == [1.0, 2.0, 3.0]
    assert session.last_rejection is outcome


def test_rejection_on_empty_session_stays_empty():
    session = LayoutSession()

    outcome = calculate(session, hanging_height=200)

    assert outcome.reason is RejectionReason.INVALID_INPUT
    assert not session.has_layout


def test_live_preview_then_apply():
    session = LayoutSession()
    calculate(session)
    previews = []
    editor = session.edit_offsets(on_change=lambda offsets: previews.append(session.render(440)))

    editor.set_offset(0, 5.0)

    assert previews[-1].by_role('picture')[0].y == 80.0
    assert session.result.vertical_offsets == [0.0, 0.0, 0.0]

    assert session.apply_offsets() == [5.0, 0.0, 0.0]
    assert session.editor is None
    assert session.render(440).by_role('picture')[0].y == 80.0


def test_closing_editor_discards_edits():
    session = LayoutSession()
    calculate(session)
    session.apply_offsets([1.0, 1.0, 1.0])
    editor = session.edit_offsets()
    editor.set_offset(2, -8.0)

    session.close_editor()

    assert session.result.vertical_offsets == [1.0, 1.0, 1.0]
    assert session.render(440).by_role('picture')[2].y == 96.0


def test_new_calculation_replaces_layout_and_closes_editor():
    session = LayoutSession()
    calculate(session)
    session.edit_offsets()

    result = calculate(session, quantity=2)

    assert session.result is result
    assert session.editor is None
    assert result.vertical_offsets == [0.0, 0.0]


def test_reset_discards_everything():
    session = LayoutSession()
    calculate(session)

    session.reset()

    assert session.result is None and session.request is None
    with pytest.raises(RuntimeError):
        session.render(440)
    with pytest.raises(RuntimeError):
        session.edit_offsets()


def test_apply_without_editor_requires_values():
    session = LayoutSession()
    calculate(session)

    with pytest.raises(RuntimeError):
        session.apply_offsets()

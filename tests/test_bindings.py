import enum

import pytest

from actionbind.bindings import BindingTable
from actionbind.kinds import Actionlike, InputControlKind, UserInputWrapper


class Action(Actionlike, enum.Enum):
    RUN = "run"
    JUMP = "jump"
    HIDE = "hide"
    AXIS = "axis"
    DUAL_AXIS = "dual_axis"
    TRIPLE_AXIS = "triple_axis"

    def input_control_kind(self):
        return {
            Action.AXIS: InputControlKind.AXIS,
            Action.DUAL_AXIS: InputControlKind.DUAL_AXIS,
            Action.TRIPLE_AXIS: InputControlKind.TRIPLE_AXIS,
        }.get(self, InputControlKind.BUTTON)


B = InputControlKind.BUTTON


def test_insertion_idempotency():
    table = BindingTable()
    assert table.add(B, Action.RUN, "Space") is True
    assert table.get_buttonlike(Action.RUN) == ["Space"]
    assert table.add(B, Action.RUN, "Space") is False
    assert table.get_buttonlike(Action.RUN) == ["Space"]


def test_multiple_insertion_keeps_order():
    table = BindingTable()
    table.add(B, Action.RUN, "Space")
    table.add(B, Action.RUN, "Enter")
    assert table.get_buttonlike(Action.RUN) == ["Space", "Enter"]
    assert len(table) == 2


def test_missing_action_returns_none():
    table = BindingTable()
    assert table.get_buttonlike(Action.JUMP) is None
    assert table.get_axislike(Action.AXIS) is None
    assert table.get(Action.DUAL_AXIS) is None


def test_get_wraps_with_kind():
    table = BindingTable()
    table.add(InputControlKind.DUAL_AXIS, Action.DUAL_AXIS, "LeftStick")
    table.add(B, Action.RUN, "ShiftLeft")
    assert table.get(Action.DUAL_AXIS) == [
        UserInputWrapper(InputControlKind.DUAL_AXIS, "LeftStick")
    ]
    assert table.get(Action.RUN) == [UserInputWrapper(B, "ShiftLeft")]


def test_kinds_are_kept_apart():
    table = BindingTable()
    table.add(InputControlKind.AXIS, Action.AXIS, "MouseX")
    table.add(InputControlKind.TRIPLE_AXIS, Action.TRIPLE_AXIS, "Gyro")
    assert list(table.axislike_actions()) == [Action.AXIS]
    assert list(table.triple_axislike_actions()) == [Action.TRIPLE_AXIS]
    assert list(table.buttonlike_actions()) == []
    assert list(table.dual_axislike_actions()) == []
    assert table.get_triple_axislike(Action.TRIPLE_AXIS) == ["Gyro"]
    assert table.get_dual_axislike(Action.TRIPLE_AXIS) is None


def test_bindings_iteration():
    table = BindingTable()
    table.add(B, Action.RUN, "KeyW")
    table.add(B, Action.RUN, "ShiftLeft")
    table.add(B, Action.JUMP, "Space")
    assert sorted(table.buttonlike_bindings(), key=lambda p: p[1]) == [
        (Action.RUN, "KeyW"),
        (Action.RUN, "ShiftLeft"),
        (Action.JUMP, "Space"),
    ]
    assert dict(table.iter_buttonlike()) == {
        Action.RUN: ["KeyW", "ShiftLeft"],
        Action.JUMP: ["Space"],
    }
    assert list(table.axislike_bindings()) == []
    assert list(table.dual_axislike_bindings()) == []
    assert list(table.triple_axislike_bindings()) == []
    assert list(table.iter_axislike()) == []
    assert list(table.iter_dual_axislike()) == []
    assert list(table.iter_triple_axislike()) == []


def test_returned_lists_are_copies():
    table = BindingTable()
    table.add(B, Action.RUN, "Space")
    table.get_buttonlike(Action.RUN).append("Enter")
    assert table.get_buttonlike(Action.RUN) == ["Space"]


def test_clear_action_restores_empty_table():
    table = BindingTable()
    table.add(B, Action.RUN, "Space")
    table.clear_action(Action.RUN)
    assert table == BindingTable()
    assert table.is_empty()


def test_remove_at():
    table = BindingTable()
    table.add(B, Action.RUN, "Space")
    table.add(B, Action.RUN, "ShiftLeft")
    assert table.remove_at(Action.RUN, 1) is True
    assert table.remove_at(Action.RUN, 1) is False
    assert table.remove_at(Action.RUN, 0) is True
    assert table.remove_at(Action.RUN, 0) is False
    assert table.remove_at(Action.JUMP, 0) is False
    assert len(table) == 0


def test_remove_at_negative_index():
    table = BindingTable()
    table.add(InputControlKind.AXIS, Action.AXIS, "MouseX")
    assert table.remove_at(Action.AXIS, -1) is False
    assert table.get_axislike(Action.AXIS) == ["MouseX"]


def test_remove_returns_index():
    table = BindingTable()
    table.add(B, Action.HIDE, "ControlLeft")
    table.add(B, Action.HIDE, "ControlRight")
    assert table.remove(Action.HIDE, "ControlRight") == 1
    assert table.remove(Action.HIDE, "ControlRight") is None
    assert table.remove(Action.JUMP, "Space") is None
    assert table.get_buttonlike(Action.HIDE) == ["ControlLeft"]


def test_len_counts_all_kinds_and_clear():
    table = BindingTable()
    table.add(B, Action.RUN, "Space")
    table.add(InputControlKind.AXIS, Action.AXIS, "MouseX")
    table.add(InputControlKind.DUAL_AXIS, Action.DUAL_AXIS, "LeftStick")
    table.add(InputControlKind.TRIPLE_AXIS, Action.TRIPLE_AXIS, "Gyro")
    assert len(table) == 4
    assert not table.is_empty()
    table.clear()
    assert len(table) == 0
    assert table == BindingTable()


def test_add_rejects_non_kind():
    table = BindingTable()
    with pytest.raises(TypeError):
        table.add("Button", Action.RUN, "Space")
# actionbind

A small library that binds *actions*, the things a player wants to do, to
*inputs*, the keys, buttons and sticks that trigger them.

Every action has a control kind (`InputControlKind`): `BUTTON`, `AXIS`,
`DUAL_AXIS` or `TRIPLE_AXIS`. An `InputMap` stores bindings for each kind
separately. It refuses a binding whose kind does not match the action's kind
by raising `InputKindError`, and it ignores duplicate bindings.

Inputs can be any hashable value: strings, enum members, tuples for chords,
and so on.

## Installing

```
pip install actionbind
```

## Defining actions

Actions are enum members that mix in `actionbind.kinds.Actionlike`. By
default an action is a button. Override `input_control_kind` to give some
members another kind:

```python
import enum

from actionbind.kinds import Actionlike, InputControlKind


class Action(Actionlike, enum.Enum):
    RUN = "run"
    JUMP = "jump"
    MOVE = "move"

    def input_control_kind(self):
        if self is Action.MOVE:
            return InputControlKind.DUAL_AXIS
        return InputControlKind.BUTTON
```

## Building a map

```python
from actionbind.input_map import InputMap

input_map = (
    InputMap([(Action.RUN, "ShiftLeft"), (Action.RUN, "ShiftRight")])
    .with_button(Action.JUMP, "Space")
    .with_one_to_many(Action.JUMP, ["KeyJ", "KeyU"])
    .with_dual_axis(Action.MOVE, "LeftStick")
)

input_map.insert(Action.JUMP, "KeyM")      # adding the same binding twice does nothing
input_map.get_buttonlike(Action.RUN)       # ['ShiftLeft', 'ShiftRight']
len(input_map)                             # total number of bindings: 7
```

The constructor takes buttonlike `(action, input)` pairs. The builders
(`with_button`, `with_axis`, `with_dual_axis`, `with_triple_axis`,
`with_one_to_many`, `with_multiple`) and the inserters (`insert`,
`insert_axis`, `insert_dual_axis`, `insert_triple_axis`,
`insert_one_to_many`, `insert_multiple`) change the map in place and return
it. `InputMap.from_mapping` builds a map from a mapping of actions to
iterables of button inputs.

`insert`, `insert_axis`, `insert_dual_axis` and `insert_triple_axis` raise
`InputKindError` (a `ValueError`) when the action's kind does not match.
`insert_one_to_many` and `from_mapping` do not check the kind.

## Reading

`InputMap` builds on `actionbind.bindings.BindingTable`, which provides:

- `get_buttonlike`, `get_axislike`, `get_dual_axislike`,
  `get_triple_axislike`: a copy of an action's inputs, or `None`.
- `get(action)`: the action's inputs as `UserInputWrapper` values tagged
  with the action's kind, or `None`.
- `iter_buttonlike()` and its siblings: `(action, inputs)` pairs.
- `buttonlike_bindings()` and its siblings: `(action, input)` pairs.
- `buttonlike_actions()` and its siblings: the actions of each kind.
- `len(map)` and `is_empty()`.

## Editing

- `clear_action(action)` removes every binding for one action.
- `remove_at(action, index)` removes the binding at a position and returns
  `True`, or returns `False` if there is none there. The action keeps an
  empty list until it is cleared.
- `remove(action, input)` removes a button binding and returns its old
  index, or `None` if it was not bound.
- `clear()` removes everything.
- `merge(other)` adds another map's bindings of every kind and skips
  duplicates. If the two maps name different gamepads, the merged map keeps
  no gamepad.

Two maps are equal when they hold the same bindings and the same gamepad.

## Gamepads

`set_gamepad(gamepad)` and `with_gamepad(gamepad)` tie a map to one gamepad,
which is read back through the `gamepad` property. `clear_gamepad()` removes
the association.

## Results

`actionbind.kinds.UpdatedValue` holds the state of one action: a `bool` for
buttons, a `float` for axes, and a tuple of two or three floats for dual and
triple axes. Values of the wrong shape raise `TypeError` or `ValueError`.
`UpdatedActions` is a `dict` from actions to `UpdatedValue`s;
`UpdatedActions.pressed(action)` is true only for a button action whose
value is `True`.

## What it does not do

The package stores and edits bindings. It does not read keyboards, mice or
gamepads, compute action states from live input, or resolve clashes
between overlapping button combinations; `UpdatedActions` is a container
for results that the caller produces.

## Running the tests

```
pip install "actionbind[test]"
pytest
```
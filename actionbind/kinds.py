"""Action kinds, binding wrappers and the values produced when actions are processed."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from numbers import Real
from typing import Any, Hashable, Tuple, Union


class InputControlKind(enum.Enum):
    """The kind of control an action, or an input bound to it, represents."""

    BUTTON = "Button"
    AXIS = "Axis"
    DUAL_AXIS = "DualAxis"
    TRIPLE_AXIS = "TripleAxis"


_INPUT_DESCRIPTIONS = {
    InputControlKind.BUTTON: "a Buttonlike",
    InputControlKind.AXIS: "an Axislike",
    InputControlKind.DUAL_AXIS: "a DualAxislike",
    InputControlKind.TRIPLE_AXIS: "a TripleAxislike",
}


class Actionlike:
    """Mixin for action types, usually combined with :class:`enum.Enum`.

    Every action is buttonlike unless the subclass overrides
    :meth:`input_control_kind` to report another kind for some actions.
    """

    def input_control_kind(self) -> InputControlKind:
        """Return the kind of input this action accepts."""
        return InputControlKind.BUTTON


class InputKindError(ValueError):
    """Raised when an input of one kind is bound to an action of another kind."""

    def __init__(self, action: Any, input_kind: InputControlKind) -> None:
        self.action = action
        self.input_kind = input_kind
        self.action_kind = action.input_control_kind()
        super().__init__(
            f"Cannot map {_INPUT_DESCRIPTIONS[input_kind]} input for action "
            f"{action!r} of kind {self.action_kind.value}"
        )


@dataclass(frozen=True)
class UserInputWrapper:
    """An input of any kind, tagged with the kind it was bound as."""

    kind: InputControlKind
    input: Hashable


Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

_VECTOR_SIZES = {InputControlKind.DUAL_AXIS: 2, InputControlKind.TRIPLE_AXIS: 3}


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class UpdatedValue:
    """The freshly computed state of one action.

    Buttons carry a ``bool``, axes a ``float``, dual axes a pair and
    triple axes a triple of floats.
    """

    kind: InputControlKind
    value: Union[bool, float, Vec2, Vec3]

    def __post_init__(self) -> None:
        if self.kind is InputControlKind.BUTTON:
            if not isinstance(self.value, bool):
                raise TypeError(f"a button value must be a bool, got {self.value!r}")
            return
        if self.kind is InputControlKind.AXIS:
            object.__setattr__(self, "value", _as_float(self.value))
            return
        size = _VECTOR_SIZES[self.kind]
        components = tuple(self.value)  # type: ignore[arg-type]
        if len(components) != size:
            raise ValueError(
                f"a {self.kind.value} value needs {size} components, got {len(components)}"
            )
        object.__setattr__(self, "value", tuple(_as_float(c) for c in components))


class UpdatedActions(dict):
    """Mapping from each action to its :class:`UpdatedValue`."""

    def pressed(self, action: Any) -> bool:
        """Return ``True`` if the action is buttonlike and pressed."""
        updated = self.get(action)
        if updated is None or updated.kind is not InputControlKind.BUTTON:
            return False
        return bool(updated.value)
"""A multi-map binding actions to buttonlike, axislike, dual- and triple-axislike inputs."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Mapping, Optional, Tuple

from .bindings import BindingTable
from .kinds import InputControlKind, InputKindError


class InputMap(BindingTable):
    """Maps actions to any number of inputs, and inputs to any number of actions.

    Every input must match the :class:`InputControlKind` of the action it is
    bound to: use :meth:`insert` for buttonlike inputs, :meth:`insert_axis`
    for axislike ones, and so on. Binding the same input to the same action
    twice leaves a single binding.

    An optional gamepad restricts the map to input from that gamepad only.
    """

    def __init__(self, bindings: Iterable[Tuple[Any, Hashable]] = ()) -> None:
        super().__init__()
        self._gamepad: Optional[Hashable] = None
        self.insert_multiple(bindings)

    @classmethod
    def from_mapping(cls, raw_map: Mapping[Any, Iterable[Hashable]]) -> "InputMap":
        """Build a map from a mapping of actions to their buttonlike inputs."""
        input_map = cls()
        for action, inputs in raw_map.items():
            input_map.insert_one_to_many(action, inputs)
        return input_map

    # Builders

    def with_button(self, action: Any, button: Hashable) -> "InputMap":
        """Bind a buttonlike input and return the map."""
        return self.insert(action, button)

    def with_axis(self, action: Any, axis: Hashable) -> "InputMap":
        """Bind an axislike input and return the map."""
        return self.insert_axis(action, axis)

    def with_dual_axis(self, action: Any, dual_axis: Hashable) -> "InputMap":
        """Bind a dual-axislike input and return the map."""
        return self.insert_dual_axis(action, dual_axis)

    def with_triple_axis(self, action: Any, triple_axis: Hashable) -> "InputMap":
        """Bind a triple-axislike input and return the map."""
        return self.insert_triple_axis(action, triple_axis)

    def with_one_to_many(self, action: Any, inputs: Iterable[Hashable]) -> "InputMap":
        """Bind several buttonlike inputs to one action and return the map."""
        return self.insert_one_to_many(action, inputs)

    def with_multiple(self, bindings: Iterable[Tuple[Any, Hashable]]) -> "InputMap":
        """Add several buttonlike ``(action, input)`` bindings and return the map."""
        return self.insert_multiple(bindings)

    # Insertion

    def _insert_checked(
        self, kind: InputControlKind, action: Any, input: Hashable
    ) -> "InputMap":
        if action.input_control_kind() is not kind:
            raise InputKindError(action, kind)
        self.add(kind, action, input)
        return self

    def insert(self, action: Any, button: Hashable) -> "InputMap":
        """Bind a buttonlike input to a buttonlike action.

        Raises :class:`InputKindError` if the action is not buttonlike.
        """
        return self._insert_checked(InputControlKind.BUTTON, action, button)

    def insert_axis(self, action: Any, axis: Hashable) -> "InputMap":
        """Bind an axislike input to an axislike action.

        Raises :class:`InputKindError` if the action is not axislike.
        """
        return self._insert_checked(InputControlKind.AXIS, action, axis)

    def insert_dual_axis(self, action: Any, dual_axis: Hashable) -> "InputMap":
        """Bind a dual-axislike input to a dual-axislike action.

        Raises :class:`InputKindError` if the action is not dual-axislike.
        """
        return self._insert_checked(InputControlKind.DUAL_AXIS, action, dual_axis)

    def insert_triple_axis(self, action: Any, triple_axis: Hashable) -> "InputMap":
        """Bind a triple-axislike input to a triple-axislike action.

        Raises :class:`InputKindError` if the action is not triple-axislike.
        """
        return self._insert_checked(InputControlKind.TRIPLE_AXIS, action, triple_axis)

    def insert_one_to_many(self, action: Any, inputs: Iterable[Hashable]) -> "InputMap":
        """Bind several buttonlike inputs to ``action``, skipping duplicates.

        The action gets an entry even when ``inputs`` is empty.
        """
        self._maps[InputControlKind.BUTTON].setdefault(action, [])
        for input in inputs:
            self.add(InputControlKind.BUTTON, action, input)
        return self

    def insert_multiple(self, bindings: Iterable[Tuple[Any, Hashable]]) -> "InputMap":
        """Add several buttonlike ``(action, input)`` bindings."""
        for action, input in bindings:
            self.insert(action, input)
        return self

    def merge(self, other: "InputMap") -> "InputMap":
        """Add every binding of ``other`` that this map lacks.

        If the two maps are tied to different gamepads, this map's gamepad
        association is removed.
        """
        if self._gamepad != other._gamepad:
            self.clear_gamepad()
        sources = (
            (InputControlKind.BUTTON, other.buttonlike_bindings()),
            (InputControlKind.AXIS, other.axislike_bindings()),
            (InputControlKind.DUAL_AXIS, other.dual_axislike_bindings()),
            (InputControlKind.TRIPLE_AXIS, other.triple_axislike_bindings()),
        )
        for kind, pairs in sources:
            for action, input in list(pairs):
                self.add(kind, action, input)
        return self

    # Gamepad association

    @property
    def gamepad(self) -> Optional[Hashable]:
        """The gamepad this map exclusively accepts input from, or ``None`` for any."""
        return self._gamepad

    def with_gamepad(self, gamepad: Hashable) -> "InputMap":
        """Tie the map to ``gamepad`` and return it."""
        return self.set_gamepad(gamepad)

    def set_gamepad(self, gamepad: Hashable) -> "InputMap":
        """Accept input only from ``gamepad``."""
        self._gamepad = gamepad
        return self

    def clear_gamepad(self) -> "InputMap":
        """Accept input from any gamepad again."""
        self._gamepad = None
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputMap):
            return NotImplemented
        return self._gamepad == other._gamepad and self._maps == other._maps

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        base = super().__repr__()
        return f"{base[:-1]}, gamepad={self._gamepad!r})" if self._gamepad is not None else base
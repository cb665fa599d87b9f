"""Storage of action-to-input bindings, split by the kind of input bound."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

from .kinds import InputControlKind, UserInputWrapper


class BindingTable:
    """Keeps, for every input kind, an ordered list of unique inputs per action.

    Lists keep insertion order and never hold the same input twice.
    An action whose last input was removed by index keeps an empty list
    until it is cleared.
    """

    def __init__(self) -> None:
        self._maps: Dict[InputControlKind, Dict[Any, List[Hashable]]] = {
            kind: {} for kind in InputControlKind
        }

    def add(self, kind: InputControlKind, action: Any, input: Hashable) -> bool:
        """Bind ``input`` of ``kind`` to ``action``.

        Returns ``True`` if the binding is new and ``False`` if it was
        already present.
        """
        if not isinstance(kind, InputControlKind):
            raise TypeError(f"expected an InputControlKind, got {kind!r}")
        inputs = self._maps[kind].setdefault(action, [])
        if input in inputs:
            return False
        inputs.append(input)
        return True

    def _iter(self, kind: InputControlKind) -> Iterator[Tuple[Any, List[Hashable]]]:
        for action, inputs in self._maps[kind].items():
            yield action, list(inputs)

    def _bindings(self, kind: InputControlKind) -> Iterator[Tuple[Any, Hashable]]:
        for action, inputs in self._maps[kind].items():
            for input in inputs:
                yield action, input

    def iter_buttonlike(self) -> Iterator[Tuple[Any, List[Hashable]]]:
        """Yield each buttonlike action with its inputs."""
        return self._iter(InputControlKind.BUTTON)

    def iter_axislike(self) -> Iterator[Tuple[Any, List[Hashable]]]:
        """Yield each axislike action with its inputs."""
        return self._iter(InputControlKind.AXIS)

    def iter_dual_axislike(self) -> Iterator[Tuple[Any, List[Hashable]]]:
        """Yield each dual-axislike action with its inputs."""
        return self._iter(InputControlKind.DUAL_AXIS)

    def iter_triple_axislike(self) -> Iterator[Tuple[Any, List[Hashable]]]:
        """Yield each triple-axislike action with its inputs."""
        return self._iter(InputControlKind.TRIPLE_AXIS)

    def buttonlike_bindings(self) -> Iterator[Tuple[Any, Hashable]]:
        """Yield every buttonlike ``(action, input)`` pair."""
        return self._bindings(InputControlKind.BUTTON)

    def axislike_bindings(self) -> Iterator[Tuple[Any, Hashable]]:
        """Yield every axislike ``(action, input)`` pair."""
        return self._bindings(InputControlKind.AXIS)

    def dual_axislike_bindings(self) -> Iterator[Tuple[Any, Hashable]]:
        """Yield every dual-axislike ``(action, input)`` pair."""
        return self._bindings(InputControlKind.DUAL_AXIS)

    def triple_axislike_bindings(self) -> Iterator[Tuple[Any, Hashable]]:
        """Yield every triple-axislike ``(action, input)`` pair."""
        return self._bindings(InputControlKind.TRIPLE_AXIS)

    def buttonlike_actions(self) -> Iterator[Any]:
        """Yield every action with buttonlike bindings."""
        return iter(list(self._maps[InputControlKind.BUTTON]))

    def axislike_actions(self) -> Iterator[Any]:
        """Yield every action with axislike bindings."""
        return iter(list(self._maps[InputControlKind.AXIS]))

    def dual_axislike_actions(self) -> Iterator[Any]:
        """Yield every action with dual-axislike bindings."""
        return iter(list(self._maps[InputControlKind.DUAL_AXIS]))

    def triple_axislike_actions(self) -> Iterator[Any]:
        """Yield every action with triple-axislike bindings."""
        return iter(list(self._maps[InputControlKind.TRIPLE_AXIS]))

    def get(self, action: Any) -> Optional[List[UserInputWrapper]]:
        """Return the inputs of ``action``, wrapped with their kind, or ``None``."""
        kind = action.input_control_kind()
        inputs = self._maps[kind].get(action)
        if inputs is None:
            return None
        return [UserInputWrapper(kind, input) for input in inputs]

    def _get(self, kind: InputControlKind, action: Any) -> Optional[List[Hashable]]:
        inputs = self._maps[kind].get(action)
        return None if inputs is None else list(inputs)

    def get_buttonlike(self, action: Any) -> Optional[List[Hashable]]:
        """Return the buttonlike inputs of ``action``, or ``None``."""
        return self._get(InputControlKind.BUTTON, action)

    def get_axislike(self, action: Any) -> Optional[List[Hashable]]:
        """Return the axislike inputs of ``action``, or ``None``."""
        return self._get(InputControlKind.AXIS, action)

    def get_dual_axislike(self, action: Any) -> Optional[List[Hashable]]:
        """Return the dual-axislike inputs of ``action``, or ``None``."""
        return self._get(InputControlKind.DUAL_AXIS, action)

    def get_triple_axislike(self, action: Any) -> Optional[List[Hashable]]:
        """Return the triple-axislike inputs of ``action``, or ``None``."""
        return self._get(InputControlKind.TRIPLE_AXIS, action)

    def __len__(self) -> int:
        return sum(
            len(inputs) for table in self._maps.values() for inputs in table.values()
        )

    def is_empty(self) -> bool:
        """Return ``True`` if no bindings are stored."""
        return len(self) == 0

    def clear(self) -> None:
        """Remove every binding."""
        for table in self._maps.values():
            table.clear()

    def clear_action(self, action: Any) -> None:
        """Remove every binding of ``action``."""
        self._maps[action.input_control_kind()].pop(action, None)

    def remove_at(self, action: Any, index: int) -> bool:
        """Remove the input of ``action`` at ``index``.

        Returns ``True`` if an input was removed, ``False`` if there was none.
        """
        inputs = self._maps[action.input_control_kind()].get(action)
        if inputs is None or index < 0 or index >= len(inputs):
            return False
        del inputs[index]
        return True

    def remove(self, action: Any, input: Hashable) -> Optional[int]:
        """Remove the buttonlike ``input`` of ``action``.

        Returns the index it held, or ``None`` if it was not bound.
        """
        inputs = self._maps[InputControlKind.BUTTON].get(action)
        if inputs is None or input not in inputs:
            return None
        index = inputs.index(input)
        del inputs[index]
        return index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindingTable):
            return NotImplemented
        return self._maps == other._maps

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{kind.value}={table!r}" for kind, table in self._maps.items() if table
        )
        return f"{type(self).__name__}({parts})"
"""Dropdown selection state machine backing the filter and sort selectors.

Call context:
    Browser view models own one ``SelectVM`` per dropdown. The web view
    forwards trigger clicks, popup show/hide events and pointer events that
    land outside the dropdown; the view model decides the resulting state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..domain.query import ALL_CATEGORIES


class SelectState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class SelectOption:
    """One selectable entry: stored value plus its display label."""

    value: str
    label: str


@dataclass
class SelectVM:
    """Explicit {CLOSED, OPEN} widget state with a selection callback.

    - ``toggle`` on trigger activation
    - ``close`` on an outside pointer event or after an item is chosen
    - ``select`` invokes ``on_value_change`` with the chosen value
    """

    value: str = ""
    options: List[SelectOption] = field(default_factory=list)
    on_value_change: Optional[Callable[[str], None]] = None
    state: SelectState = SelectState.CLOSED

    @property
    def is_open(self) -> bool:
        return self.state is SelectState.OPEN

    def open(self) -> None:
        self.state = SelectState.OPEN

    def close(self) -> None:
        self.state = SelectState.CLOSED

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def handle_pointer_down(self, *, inside: bool) -> None:
        """Dismiss the dropdown when a pointer press lands outside of it."""
        if not inside:
            self.close()

    def select(self, value: str) -> None:
        self.value = value
        if self.on_value_change:
            self.on_value_change(value)
        self.close()

    def set_options(self, options: Sequence[Tuple[str, str]]) -> None:
        self.options = [SelectOption(value=value, label=label) for value, label in options]

    def option_map(self) -> Dict[str, str]:
        """Return ``{value: label}`` in display order, as NiceGUI selects expect."""
        return {option.value: option.label for option in self.options}

    def display_text(self, placeholder: str) -> str:
        """Text shown in the trigger: placeholder for empty/``all``, else the label."""
        if not self.value or self.value == ALL_CATEGORIES:
            return placeholder
        for option in self.options:
            if option.value == self.value:
                return option.label
        return self.value


__all__ = ["SelectOption", "SelectState", "SelectVM"]

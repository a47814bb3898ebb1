"""
Semantic UI component model.

Every Figma node that the semantic tree recognises becomes one of the concrete
components defined here (Button, InputField, NavigationRegion). They share the
storage and serialisation of ``UIComponent`` and each supplies its own
screen-reader description and keyboard hint.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from backend.utils.errors import ChildContractError


class UIComponent(ABC):
    """Abstract base for all semantic components."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "to_audit_object" in cls.__dict__:
            raise TypeError(f"{cls.__name__} must not override to_audit_object()")

    def __init__(self, id: str, label: str, role: str):
        if not isinstance(id, str) or not id:
            raise ValueError("UIComponent requires a non-empty id.")
        if not isinstance(label, str) or not label:
            raise ValueError("UIComponent requires a non-empty label.")
        if not isinstance(role, str) or not role:
            raise ValueError("UIComponent requires a non-empty role.")

        self._id = id
        self._label = label
        self._role = role
        self._children: List[UIComponent] = []
        self._state: Dict[str, Any] = {}

    @property
    def id(self) -> str:
        return self._id

    @property
    def role(self) -> str:
        return self._role

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: str) -> None:
        if not isinstance(value, str) or not value:
            raise ValueError("Label cannot be empty.")
        self._label = value

    @property
    def state(self) -> Dict[str, Any]:
        return dict(self._state)

    def get_state(self, key: str) -> Any:
        return self._state.get(key)

    def set_state(self, key: str, value: Any) -> None:
        self._state[key] = value

    def add_child(self, component: "UIComponent") -> None:
        if not isinstance(component, UIComponent):
            raise ChildContractError("Child must be a UIComponent instance.")
        self._children.append(component)

    def get_children(self) -> List["UIComponent"]:
        return list(self._children)

    @abstractmethod
    def describe(self) -> str:
        """Screen-reader sentence for this component."""

    @abstractmethod
    def navigate(self) -> str:
        """Keyboard interaction hint for this component."""

    def to_audit_object(self) -> Dict[str, Any]:
        """Serialise this component and its subtree to plain data."""
        return {
            "id": self._id,
            "label": self._label,
            "role": self._role,
            "state": dict(self._state),
            "children": [child.to_audit_object() for child in self._children],
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, label={self._label!r})"


class Button(UIComponent):
    """Figma nodes that act as buttons."""

    def __init__(self, id: str, label: str):
        super().__init__(id, label, "button")
        self._state["focusable"] = True
        self._state["disabled"] = False

    def set_disabled(self, value: Any) -> None:
        self._state["disabled"] = bool(value)

    def describe(self) -> str:
        dis = ", disabled" if self._state.get("disabled") else ""
        return f'Button: "{self._label}"{dis}. Press Enter or Space to activate.'

    def navigate(self) -> str:
        return f'Tab to focus "{self._label}" button. Enter or Space to click.'


class InputField(UIComponent):
    """Text entry nodes; ``input_type`` is free-form (text, email, password...)."""

    def __init__(self, id: str, label: str, input_type: str = "text"):
        super().__init__(id, label, "textbox")
        self._input_type = input_type
        self._state["focusable"] = True
        self._state["required"] = False

    @property
    def input_type(self) -> str:
        return self._input_type

    def set_required(self, value: Any) -> None:
        self._state["required"] = bool(value)

    def describe(self) -> str:
        req = ", required" if self._state.get("required") else ""
        return f'Input field: "{self._label}" ({self._input_type}){req}. Type to enter a value.'

    def navigate(self) -> str:
        return f'Tab to focus "{self._label}" input. Type to enter value.'


class NavigationRegion(UIComponent):
    """Frames used as navigation areas. Not focusable itself."""

    def __init__(self, id: str, label: str):
        super().__init__(id, label, "navigation")
        self._state["expanded"] = True

    def describe(self) -> str:
        count = len(self._children)
        plural = "" if count == 1 else "s"
        return f'Navigation region: "{self._label}" with {count} item{plural}.'

    def navigate(self) -> str:
        return f'Tab into "{self._label}" navigation. Use arrow keys to move between links.'


def child_components(component: Any) -> List[UIComponent]:
    """Children of ``component``, or an empty list for non-components."""
    if isinstance(component, UIComponent):
        return component.get_children()
    return []

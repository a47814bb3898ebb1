"""
Semantic tree builder.

Maps raw Figma nodes (``{"id", "name", "children"}``) onto typed UI components.
Classification is a case-insensitive substring match of the node name against
an ordered vocabulary. Nodes that cannot be classified or constructed are
recorded as parse errors and dropped together with their subtree; everything
else in the document is still built.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple

from backend.ui_components import Button, InputField, NavigationRegion, UIComponent
from backend.utils.errors import ChildContractError, ensure_sequence

logger = logging.getLogger(__name__)

UNKNOWN_NODE_ID = "unknown"
DEFAULT_MAX_TREE_DEPTH = 64
# Builder and the three walks recurse once per level; keep well under sys.getrecursionlimit().
MAX_ALLOWED_TREE_DEPTH = 256
MAX_TREE_DEPTH_ENV = "SEMANTIC_TREE_MAX_DEPTH"

ComponentFactory = Callable[[Mapping[str, Any]], UIComponent]

# Evaluated in order; the first substring found in the lowercased name wins.
# A name such as "Input nav" therefore becomes an InputField.
COMPONENT_MAP: Tuple[Tuple[str, ComponentFactory], ...] = (
    ("button", lambda node: Button(node.get("id"), node.get("name"))),
    ("input", lambda node: InputField(node.get("id"), node.get("name"))),
    ("textbox", lambda node: InputField(node.get("id"), node.get("name"))),
    ("nav", lambda node: NavigationRegion(node.get("id"), node.get("name"))),
    ("navigation", lambda node: NavigationRegion(node.get("id"), node.get("name"))),
)


def _parse_positive_int(value: Any) -> Optional[int]:
    """Return value as positive int if possible; otherwise None."""
    if value is None:
        return None

    try:
        number = int(value)
    except (TypeError, ValueError):
        return None

    return number if number > 0 else None


def get_max_tree_depth(override: Optional[int] = None) -> int:
    """Resolve the nesting limit for raw node trees.

    Order of precedence:
    1. Explicit override argument (if valid positive int)
    2. SEMANTIC_TREE_MAX_DEPTH env var
    3. DEFAULT_MAX_TREE_DEPTH fallback

    Configured values are capped at MAX_ALLOWED_TREE_DEPTH.
    """
    override_value = _parse_positive_int(override)
    if override_value is not None:
        return min(override_value, MAX_ALLOWED_TREE_DEPTH)

    env_value = _parse_positive_int(os.getenv(MAX_TREE_DEPTH_ENV))
    if env_value is not None:
        return min(env_value, MAX_ALLOWED_TREE_DEPTH)

    return DEFAULT_MAX_TREE_DEPTH


@dataclass(frozen=True)
class ParseError:
    """A recoverable failure tied to one raw node."""

    node_id: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"nodeId": self.node_id, "message": self.message}


@dataclass(frozen=True)
class BuildResult:
    roots: Tuple[UIComponent, ...] = field(default_factory=tuple)
    errors: Tuple[ParseError, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "components": [root.to_audit_object() for root in self.roots],
            "errors": [error.to_dict() for error in self.errors],
        }


def _node_id(node: Any) -> str:
    if not isinstance(node, Mapping):
        return UNKNOWN_NODE_ID
    value = node.get("id")
    if value is None or value == "":
        return UNKNOWN_NODE_ID
    return str(value)


def _classify(name: Any) -> Optional[Tuple[str, ComponentFactory]]:
    if not isinstance(name, str):
        return None
    lower = name.lower()
    for key, factory in COMPONENT_MAP:
        if key in lower:
            return key, factory
    return None


def resolve_component_key(name: Any) -> Optional[str]:
    """Return the first vocabulary key contained in ``name``, e.g. "Submit Button" -> "button"."""
    match = _classify(name)
    return match[0] if match else None


class SemanticTree:
    """Builds and holds the component tree for one Figma document."""

    def __init__(self, max_depth: Optional[int] = None):
        self._max_depth = get_max_tree_depth(max_depth)
        self._result = BuildResult()

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def result(self) -> BuildResult:
        return self._result

    @property
    def roots(self) -> List[UIComponent]:
        return list(self._result.roots)

    @property
    def errors(self) -> List[ParseError]:
        return list(self._result.errors)

    def build(self, nodes: Any) -> BuildResult:
        """Build the tree from ``document.children`` and replace any previous result."""
        ensure_sequence(nodes, "SemanticTree.build()")

        roots: List[UIComponent] = []
        errors: List[ParseError] = []
        for node in nodes:
            component = self._parse_node(node, errors, depth=1, ancestors=frozenset())
            if component is not None:
                roots.append(component)

        self._result = BuildResult(roots=tuple(roots), errors=tuple(errors))
        logger.info(
            "[SemanticTree] Built %d root component(s) from %d node(s); %d parse error(s)",
            len(roots),
            len(nodes),
            len(errors),
        )
        return self._result

    def _parse_node(
        self,
        node: Any,
        errors: List[ParseError],
        depth: int,
        ancestors: FrozenSet[int],
    ) -> Optional[UIComponent]:
        """Map one raw node (and its children) to a component, or None on failure."""
        if not isinstance(node, Mapping):
            self._record(errors, UNKNOWN_NODE_ID, "Invalid node: expected an object.")
            return None

        node_id = _node_id(node)
        if depth > self._max_depth:
            self._record(
                errors,
                node_id,
                f"Maximum nesting depth of {self._max_depth} exceeded. Subtree skipped.",
            )
            return None
        if id(node) in ancestors:
            self._record(errors, node_id, "Cyclic node reference detected. Subtree skipped.")
            return None

        name = node.get("name")
        match = _classify(name)
        if match is None:
            self._record(errors, node_id, f'Unsupported component type: "{name}". Skipped.')
            return None

        _key, factory = match
        try:
            component = factory(node)
        except Exception as exc:
            self._record(errors, node_id, str(exc))
            return None

        children = node.get("children")
        if isinstance(children, (list, tuple)):
            path = ancestors | {id(node)}
            for child in children:
                child_component = self._parse_node(child, errors, depth + 1, path)
                if child_component is None:
                    continue
                try:
                    component.add_child(child_component)
                except ChildContractError as exc:
                    self._record(errors, _node_id(child), str(exc))

        return component

    @staticmethod
    def _record(errors: List[ParseError], node_id: str, message: str) -> None:
        logger.debug("[SemanticTree] Skipping node %s: %s", node_id, message)
        errors.append(ParseError(node_id=node_id, message=message))

    def to_dict(self) -> Dict[str, Any]:
        return self._result.to_dict()

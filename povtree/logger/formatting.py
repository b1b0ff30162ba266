"""Text formatting utilities for logging."""

from typing import TYPE_CHECKING, Any, Hashable, Iterable, List, Sequence, Tuple

if TYPE_CHECKING:
    from povtree.tree import Node


def format_path(labels: Sequence[Any]) -> str:
    """Format a label path as ``a -> b -> c``."""
    if not labels:
        return "∅"
    return " -> ".join(str(label) for label in labels)


def format_edges(edges: Iterable[Tuple[Hashable, Hashable]]) -> str:
    """Format parent/child edges as a sorted, brace-enclosed list."""
    # Labels need not be mutually comparable, their text always is
    ordered = sorted(edges, key=lambda e: (str(e[0]), str(e[1])))
    if not ordered:
        return "∅"
    return "{" + ", ".join(f"{p}->{c}" for p, c in ordered) + "}"


def format_indented(root: "Node", indent: str = "  ") -> str:
    """
    Render a tree one node per line, children indented below their parent.

        x
          a
            b
    """
    lines: List[str] = []
    stack: List[Tuple["Node", int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        lines.append(f"{indent * depth}{node.label}")
        for child in reversed(node.children):
            stack.append((child, depth + 1))
    return "\n".join(lines)

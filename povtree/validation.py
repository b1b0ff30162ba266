"""
Optional well-formedness checks for trees.

Trees are assumed to be well formed: every node owned by exactly one parent,
no node its own descendant, and labels unique. Nothing in the core operations
checks this. ``validate_tree`` is the opt-in construction-time pass, also run
by ``reorient``/``path_between`` when ``PovConfig.validate_input`` is set.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Hashable, List, Set

from povtree.exceptions import MalformedTreeError

if TYPE_CHECKING:
    from povtree.tree import Node


def validate_tree(root: Node) -> None:
    """
    Check that the tree below ``root`` is a proper tree with unique labels.

    The walk is iterative and stops at the first node reached twice, so it
    terminates on cyclic input as well.

    Args:
        root: The node treated as the root

    Raises:
        MalformedTreeError: If a node is reachable more than once (shared
            child or cycle) or if two nodes carry the same label
    """
    seen_ids: Set[int] = set()
    labels: Set[Hashable] = set()
    stack: List[Node] = [root]

    while stack:
        node = stack.pop()
        if id(node) in seen_ids:
            raise MalformedTreeError(
                f"Node {node!r} is reachable more than once "
                "(shared between parents or part of a cycle)"
            )
        seen_ids.add(id(node))

        if node.label in labels:
            raise MalformedTreeError(f"Duplicate label {node.label!r} in tree")
        labels.add(node.label)

        for child in reversed(node.children):
            stack.append(child)


def is_well_formed(root: Node) -> bool:
    """Return True if ``validate_tree`` accepts the tree."""
    try:
        validate_tree(root)
    except MalformedTreeError:
        return False
    return True

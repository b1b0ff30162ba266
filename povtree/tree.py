from __future__ import annotations
from typing import Any, Dict, FrozenSet, Hashable, Iterable, List, Optional, Set, Tuple

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self
from povtree.config import PathStrategy, PovConfig, resolve_config
from povtree.exceptions import NodeNotFoundError
from povtree.logger import pov_logger
from povtree.validation import validate_tree


Edge = Tuple[Hashable, Hashable]


class Node:
    """
    Labeled tree node owning an ordered list of child subtrees.

    No parent pointer is stored. Whichever node an operation is called on is
    the root for that call, and ancestry is recovered by walking down from
    it. Labels are expected to be unique within one tree.

    Using __slots__ keeps nodes small; a tree is nothing but nodes.
    """

    __slots__ = ("label", "children")

    # Type annotations (for static analysis, not runtime)
    label: Hashable
    children: List[Self]

    def __init__(self, label: Hashable, children: Optional[Iterable[Self]] = None):
        self.label = label
        # Avoid mutable default arguments; take ownership of a fresh list
        self.children = list(children) if children is not None else []

    # ------------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------------
    def append_child(self, node: Self) -> Self:
        """Attach ``node`` as the last child and return ``self`` for chaining."""
        self.children.append(node)
        return self

    def deep_copy(self) -> Self:
        """Return a structural copy of this subtree. Labels are shared, not copied."""
        new_root = object.__new__(type(self))
        new_root.label = self.label
        new_root.children = []

        # Iterative copy so deep chains do not hit the recursion limit
        stack: List[Tuple[Self, Self]] = [(self, new_root)]
        while stack:
            original, copy = stack.pop()
            for child in original.children:
                child_copy = object.__new__(type(self))
                child_copy.label = child.label
                child_copy.children = []
                copy.children.append(child_copy)
                stack.append((child, child_copy))
        return new_root

    # ------------------------------------------------------------------------
    # Equality, hashing & display
    # ------------------------------------------------------------------------
    def __eq__(self, other: Any) -> bool:
        """
        Two trees are equal when they have the same root label and the same
        set of parent/child edges. Sibling order is ignored.
        """
        if not isinstance(other, Node):
            return NotImplemented
        if self is other:
            return True
        return self.label == other.label and self.edges() == other.edges()

    def __hash__(self) -> int:
        # Equal trees always share the root label
        return hash(self.label)

    def __repr__(self) -> str:
        return f"Node({self.label!r})"

    def __str__(self) -> str:
        """
        Compact S-expression: a leaf is its label, an inner node is
        ``(label child child ...)``, e.g. ``(x (a (b c d) e) (f g (h i j)))``.
        """
        # Post-order over an explicit stack, rendering children before parents
        rendered: Dict[int, str] = {}
        stack: List[Tuple[Self, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if not node.children:
                rendered[id(node)] = str(node.label)
            elif not expanded:
                stack.append((node, True))
                for child in reversed(node.children):
                    stack.append((child, False))
            else:
                parts = [str(node.label)]
                parts.extend(rendered.pop(id(child)) for child in node.children)
                rendered[id(node)] = "(" + " ".join(parts) + ")"
        return rendered[id(self)]

    def __len__(self) -> int:
        return len(self.traverse())

    def __contains__(self, label: Hashable) -> bool:
        return self.contains(label)

    # ------------------------------------------------------------------------
    # Traversal & lookup
    # ------------------------------------------------------------------------
    def traverse(self) -> List[Self]:
        """
        Return a list of all nodes in the subtree rooted at this node (Pre-order).
        Uses an iterative stack approach to avoid recursion depth issues.
        """
        nodes: List[Self] = []
        stack: List[Self] = [self]

        while stack:
            current = stack.pop()
            nodes.append(current)
            # Add children in reverse to maintain left-to-right visit order (pre-order)
            for child in reversed(current.children):
                stack.append(child)

        return nodes

    def labels(self) -> List[Hashable]:
        """Labels of all nodes in pre-order."""
        return [node.label for node in self.traverse()]

    def edges(self) -> FrozenSet[Edge]:
        """Return the set of ``(parent_label, child_label)`` edges below this node."""
        return frozenset(
            (node.label, child.label)
            for node in self.traverse()
            for child in node.children
        )

    def is_isomorphic(self, other: Node) -> bool:
        """
        True if both trees connect the same labels, regardless of which node
        is the root and of sibling order.
        """
        undirected_self: Set[FrozenSet[Hashable]] = {
            frozenset(edge) for edge in self.edges()
        }
        undirected_other: Set[FrozenSet[Hashable]] = {
            frozenset(edge) for edge in other.edges()
        }
        return (
            set(self.labels()) == set(other.labels())
            and undirected_self == undirected_other
        )

    def get_leaves(self) -> List[Self]:
        """Return all leaf nodes in the subtree rooted at this node."""
        return [node for node in self.traverse() if not node.children]

    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def path_to(self, label: Hashable) -> Optional[List[Self]]:
        """
        Return the nodes from this node down to the node carrying ``label``
        (both inclusive), or None if no such node exists below.

        Children are searched in their current order.
        """
        # cursors[i] is the index of the next child of path[i] to visit
        path: List[Self] = [self]
        cursors: List[int] = [0]
        if self.label == label:
            return path

        while path:
            node = path[-1]
            index = cursors[-1]
            if index == len(node.children):
                path.pop()
                cursors.pop()
                continue
            cursors[-1] = index + 1
            child = node.children[index]
            path.append(child)
            cursors.append(0)
            if child.label == label:
                return path
        return None

    def find(self, label: Hashable) -> Self:
        """Return the node carrying ``label``; raise NodeNotFoundError otherwise."""
        path = self.path_to(label)
        if path is None:
            NodeNotFoundError.raise_missing_label(label, "find")
        return path[-1]

    def contains(self, label: Hashable) -> bool:
        return self.path_to(label) is not None

    # ------------------------------------------------------------------------
    # Point of view
    # ------------------------------------------------------------------------
    def reorient(self, label: Hashable, config: Optional[PovConfig] = None) -> Self:
        """
        Re-root the tree at the node carrying ``label`` and return that node.

        Every edge on the path from this node down to the target is reversed,
        every other subtree stays attached to the node that owned it. The
        target is located before anything is changed, so a missing label
        leaves the tree untouched.

        Args:
            label: Label of the node that becomes the new root
            config: Overrides the active PovConfig for this call

        Returns:
            The new root. It is ``self`` when ``label`` is this node's label.

        Raises:
            NodeNotFoundError: If no node carries ``label``
        """
        config = resolve_config(config)
        if config.validate_input:
            validate_tree(self)

        if self.label == label:
            return self

        path = self.path_to(label)
        if path is None:
            NodeNotFoundError.raise_missing_label(label, "reorient")

        if not pov_logger.disabled:
            pov_logger.section(f"Reorient {self.label!r} -> {label!r}")
            pov_logger.log_path([node.label for node in path], "Path to new root")
            pov_logger.log_tree(self, "Before")

        # Detach each on-path child from its parent. Siblings after it come
        # first, then the ones already searched, in encounter order.
        for parent, child in zip(path, path[1:]):
            index = next(i for i, c in enumerate(parent.children) if c is child)
            parent.children = parent.children[index + 1 :] + parent.children[:index]

        # Hang each former parent below its former child
        for parent, child in zip(path, path[1:]):
            child.children.append(parent)
            if not pov_logger.disabled:
                pov_logger.debug(f"Reversed edge {parent.label!r} -> {child.label!r}")

        new_root = path[-1]
        if not pov_logger.disabled:
            pov_logger.log_tree(new_root, "After")
            pov_logger.end_section()
        return new_root

    def path_between(
        self,
        from_label: Hashable,
        to_label: Hashable,
        config: Optional[PovConfig] = None,
    ) -> List[Hashable]:
        """
        Return the labels on the unique path from ``from_label`` to ``to_label``.

        Both ends are included; a path from a label to itself is ``[label]``.
        The tree this is called on is never modified.

        Args:
            from_label: Label the path starts at
            to_label: Label the path ends at
            config: Overrides the active PovConfig for this call

        Returns:
            List of labels, at least one element long

        Raises:
            NodeNotFoundError: If either label is absent
        """
        config = resolve_config(config)
        if config.validate_input:
            validate_tree(self)

        if config.path_strategy is PathStrategy.VIEW:
            path = self._path_by_common_ancestor(from_label, to_label)
        else:
            path = self._path_by_reorienting_copy(from_label, to_label)

        if not pov_logger.disabled:
            pov_logger.log_path(
                path, f"Path {from_label!r} -> {to_label!r} ({config.path_strategy.value})"
            )
        return path

    def _path_by_reorienting_copy(
        self, from_label: Hashable, to_label: Hashable
    ) -> List[Hashable]:
        # Seen from the destination, the path is a plain downward search
        if not self.contains(to_label):
            NodeNotFoundError.raise_missing_label(to_label, "path_between")
        root = self.deep_copy().reorient(to_label, PovConfig())

        downward = root.path_to(from_label)
        if downward is None:
            NodeNotFoundError.raise_missing_label(from_label, "path_between")
        return [node.label for node in reversed(downward)]

    def _path_by_common_ancestor(
        self, from_label: Hashable, to_label: Hashable
    ) -> List[Hashable]:
        to_path = self.path_to(to_label)
        if to_path is None:
            NodeNotFoundError.raise_missing_label(to_label, "path_between")
        from_path = self.path_to(from_label)
        if from_path is None:
            NodeNotFoundError.raise_missing_label(from_label, "path_between")

        # Length of the shared prefix; its last node is the lowest common ancestor
        shared = 0
        for a, b in zip(from_path, to_path):
            if a is not b:
                break
            shared += 1

        upward = [node.label for node in reversed(from_path[shared:])]
        downward = [node.label for node in to_path[shared - 1 :]]
        return upward + downward

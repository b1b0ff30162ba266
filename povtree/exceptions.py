"""
Custom exceptions for point-of-view tree operations.
"""

from __future__ import annotations
from typing import Hashable, NoReturn, Optional


class PovTreeError(Exception):
    """Base exception for tree re-rooting and path errors."""

    pass


class NodeNotFoundError(PovTreeError, KeyError):
    """Raised when a requested label does not exist in the tree."""

    def __init__(self, label: Hashable, message: Optional[str] = None):
        self.label = label
        self.message = message or f"No node labelled {label!r} in tree"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.message

    @staticmethod
    def raise_missing_label(label: Hashable, operation: str) -> NoReturn:
        """
        Raises a NodeNotFoundError for a label that could not be located.

        Args:
            label: The label that was searched for
            operation: Name of the operation that needed the label

        Raises:
            NodeNotFoundError: Always raised with the operation in the message
        """
        from povtree.logger import pov_logger

        message = f"{operation}: no node labelled {label!r} in tree"
        if not pov_logger.disabled:
            pov_logger.error(message)
        raise NodeNotFoundError(label, message)


class MalformedTreeError(PovTreeError, ValueError):
    """Raised by the validation pass when a tree is not well formed."""

    pass

"""Point-of-view trees: re-rooting and paths between labeled nodes."""

from povtree.config import PathStrategy, PovConfig, get_config, use_config
from povtree.exceptions import MalformedTreeError, NodeNotFoundError, PovTreeError
from povtree.tree import Node
from povtree.validation import is_well_formed, validate_tree

__all__ = [
    "Node",
    "PathStrategy",
    "PovConfig",
    "get_config",
    "use_config",
    "PovTreeError",
    "NodeNotFoundError",
    "MalformedTreeError",
    "validate_tree",
    "is_well_formed",
]

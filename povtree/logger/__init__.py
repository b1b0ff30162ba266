"""Logging package for povtree."""

from povtree.logger.base_logger import AlgorithmLogger
from povtree.logger.table_logger import TableLogger
from povtree.logger.tree_logger import TreeLogger
from povtree.logger.combined_logger import Logger
from povtree.logger.formatting import (
    format_path,
    format_edges,
    format_indented,
)

# Unified singleton for tracing reorient and path_between
pov_logger = Logger("PointOfView")
pov_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "TreeLogger",
    "Logger",
    "pov_logger",
    "format_path",
    "format_edges",
    "format_indented",
]

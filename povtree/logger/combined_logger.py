"""Combined logger with all functionality."""

from povtree.logger.base_logger import AlgorithmLogger
from povtree.logger.tree_logger import TreeLogger
import logging


class Logger(TreeLogger):
    """
    Combined logger used by the tree operations.

    Usage:
        logger = Logger("my_algorithm")
        logger.section("Phase 1")
        logger.info("Starting phase 1...")
        logger.table(data, headers=["col1", "col2"])
        logger.log_tree(root, "Before")
    """

    def __init__(self, name: str):
        AlgorithmLogger.__init__(self, name)

    def setup_console_logging(self, level: int = logging.INFO):
        """Enable logging to the console."""
        self.disabled = False
        if not any(isinstance(h, logging.StreamHandler) for h in self.logger.handlers):
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(level)

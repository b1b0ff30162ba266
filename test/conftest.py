import logging

import pytest

from povtree.logger import pov_logger
from povtree.tree import Node


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Enable point-of-view trace logger
    pov_logger.disabled = False


@pytest.fixture
def quiet_logger():
    """Silence pov_logger for tests that build very large trees."""
    previous = pov_logger.disabled
    pov_logger.disabled = True
    yield pov_logger
    pov_logger.disabled = previous


def make_sample_tree():
    r"""
    Build the reference tree used across tests:

              x
            /   \
           a     f
          / \   / \
         b   e g   h
        / \       / \
       c   d     i   j
    """
    return Node(
        "x",
        [
            Node("a", [Node("b", [Node("c"), Node("d")]), Node("e")]),
            Node("f", [Node("g"), Node("h", [Node("i"), Node("j")])]),
        ],
    )


@pytest.fixture
def sample_tree():
    return make_sample_tree()


@pytest.fixture
def tree_factory():
    """Return a callable building fresh copies of the reference tree."""
    return make_sample_tree

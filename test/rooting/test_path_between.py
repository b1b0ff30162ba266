import itertools

import pytest

from povtree.config import PathStrategy, PovConfig, use_config
from povtree.exceptions import NodeNotFoundError
from povtree.tree import Node

LABELS = ["x", "a", "b", "c", "d", "e", "f", "g", "h", "i", "j"]


@pytest.fixture(params=[PathStrategy.COPY, PathStrategy.VIEW], ids=lambda s: s.value)
def config(request):
    return PovConfig(path_strategy=request.param)


def test_path_from_root_to_leaf(sample_tree, config):
    assert sample_tree.path_between("x", "i", config=config) == ["x", "f", "h", "i"]


def test_path_between_cousins(sample_tree, config):
    assert sample_tree.path_between("c", "j", config=config) == [
        "c",
        "b",
        "a",
        "x",
        "f",
        "h",
        "j",
    ]


def test_path_between_siblings(sample_tree, config):
    assert sample_tree.path_between("c", "d", config=config) == ["c", "b", "d"]


def test_path_from_leaf_to_root(sample_tree, config):
    assert sample_tree.path_between("j", "x", config=config) == ["j", "h", "f", "x"]


def test_self_path(sample_tree, config):
    assert sample_tree.path_between("e", "e", config=config) == ["e"]
    assert sample_tree.path_between("x", "x", config=config) == ["x"]


def test_paths_are_reverses(sample_tree, config):
    for start, end in itertools.combinations(LABELS, 2):
        forward = sample_tree.path_between(start, end, config=config)
        backward = sample_tree.path_between(end, start, config=config)
        assert forward == backward[::-1]
        assert forward[0] == start
        assert forward[-1] == end


def test_strategies_agree(sample_tree):
    copy_config = PovConfig(path_strategy=PathStrategy.COPY)
    view_config = PovConfig(path_strategy=PathStrategy.VIEW)
    for start, end in itertools.product(LABELS, repeat=2):
        assert sample_tree.path_between(
            start, end, config=copy_config
        ) == sample_tree.path_between(start, end, config=view_config)


@pytest.mark.parametrize(
    "start,end",
    [("x", "nope"), ("nope", "x"), ("nope", "nope"), ("c", "zz"), ("zz", "c")],
)
def test_missing_label_raises(sample_tree, config, start, end):
    with pytest.raises(NodeNotFoundError):
        sample_tree.path_between(start, end, config=config)


def test_missing_label_is_reported(sample_tree, config):
    with pytest.raises(NodeNotFoundError) as excinfo:
        sample_tree.path_between("c", "zz", config=config)
    assert excinfo.value.label == "zz"
    assert "path_between" in str(excinfo.value)


def test_path_does_not_modify_tree(sample_tree, config):
    text_before = str(sample_tree)
    ids_before = [id(n) for n in sample_tree.traverse()]
    sample_tree.path_between("c", "j", config=config)
    assert str(sample_tree) == text_before
    assert [id(n) for n in sample_tree.traverse()] == ids_before


def test_path_after_reorient(sample_tree, config):
    root = sample_tree.reorient("g")
    assert root.path_between("x", "i", config=config) == ["x", "f", "h", "i"]


def test_active_config_selects_strategy(sample_tree):
    with use_config(PovConfig(path_strategy=PathStrategy.VIEW)):
        assert sample_tree.path_between("d", "g") == ["d", "b", "a", "x", "f", "g"]
    assert sample_tree.path_between("d", "g") == ["d", "b", "a", "x", "f", "g"]


def test_long_chain_path(quiet_logger, config):
    nodes = [Node(i) for i in range(3000)]
    for parent, child in zip(nodes, nodes[1:]):
        parent.append_child(child)
    path = nodes[0].path_between(2999, 0, config=config)
    assert path == list(range(2999, -1, -1))

"""Configuration for point-of-view tree operations."""

from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class PathStrategy(Enum):
    # Reorient a deep copy at the destination and search it
    COPY = "copy"
    # Splice the two root paths at their lowest common ancestor
    VIEW = "view"


@dataclass(frozen=True)
class PovConfig:
    """Configuration for reorient and path_between."""

    path_strategy: PathStrategy = PathStrategy.COPY
    validate_input: bool = False


# Active configuration (context-local, installed by use_config)
_ACTIVE_CONFIG: ContextVar[PovConfig] = ContextVar(
    "_ACTIVE_CONFIG", default=PovConfig()
)


def get_config() -> PovConfig:
    return _ACTIVE_CONFIG.get()


def resolve_config(config: Optional[PovConfig] = None) -> PovConfig:
    """Return an explicitly passed config, falling back to the active one."""
    return config if config is not None else _ACTIVE_CONFIG.get()


@contextmanager
def use_config(config: PovConfig) -> Iterator[PovConfig]:
    """
    Install ``config`` as the active configuration for the enclosed block.

    Example:
        with use_config(PovConfig(path_strategy=PathStrategy.VIEW)):
            tree.path_between("c", "j")
    """
    token = _ACTIVE_CONFIG.set(config)
    try:
        yield config
    finally:
        _ACTIVE_CONFIG.reset(token)

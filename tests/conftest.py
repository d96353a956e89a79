"""Shared fixtures: a registry with built-in and helper kinds, and an engine over it."""

import logging

import pytest

from nodeflow.config import EngineConfig
from nodeflow.engine import GraphEngine
from nodeflow.foundation.registry import NodeRegistry
from nodeflow.kinds import register_builtin_kinds
from tests.foundation.helpers import register_helper_kinds


@pytest.fixture
def registry() -> NodeRegistry:
    r = NodeRegistry()
    register_builtin_kinds(r)
    register_helper_kinds(r)
    return r


@pytest.fixture
def engine(registry: NodeRegistry) -> GraphEngine:
    return GraphEngine(registry=registry)


@pytest.fixture
def guarded_engine(registry: NodeRegistry) -> GraphEngine:
    """Engine with every optional edge guard switched on."""
    config = EngineConfig(
        detect_cycles=True,
        reject_duplicate_edges=True,
        enforce_max_connections=True,
    )
    return GraphEngine(registry=registry, config=config)


@pytest.fixture
def package_logger():
    """The "nodeflow" logger, with its level restored after the test."""
    logger = logging.getLogger("nodeflow")
    level = logger.level
    yield logger
    logger.setLevel(level)

"""
conftest.py
-----------
Shared pytest configuration and fixtures for popshot tests.

Contains:
- Common fixtures used across multiple test modules
- Pytest configuration and hooks
- Scripted random sources for deterministic cascade and combat tests
"""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest
from unittest.mock import MagicMock

from popshot.core.debug.debug_logger import LoggerConfig
from popshot.core.runtime.round_context import RoundContext
from popshot.entities.base_entity import CanvasBounds
from popshot.entities.entity_state import RoundState
from popshot.systems.combat.combat_resolver import CombatResolver
from popshot.systems.level.round_config import RoundTable
from popshot.systems.level.round_controller import RoundController
from popshot.systems.level.spawn_policy import SpawnPolicy


# ===========================================================
# Logging
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep engine logs out of test output."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


# ===========================================================
# Core Fixtures
# ===========================================================

@pytest.fixture
def bounds():
    return CanvasBounds(1280, 720)


@pytest.fixture
def round_table():
    """Built-in round table (no file access)."""
    return RoundTable()


@pytest.fixture
def context(round_table):
    """A context already running round 1."""
    ctx = RoundContext(seed=1234)
    ctx.begin_round(round_table.config_for(1))
    ctx.state = RoundState.RUNNING
    return ctx


@pytest.fixture
def resolver(context):
    return CombatResolver(context)


@pytest.fixture
def controller(round_table):
    """Idle controller on built-in tables with a fixed seed."""
    return RoundController(
        round_table=round_table,
        spawn_policy=SpawnPolicy(),
        on_ui_update=MagicMock(),
        on_round_won=MagicMock(),
        on_round_lost=MagicMock(),
        seed=99,
    )


# ===========================================================
# Test Utilities
# ===========================================================

def scripted_rng(randoms=(), randint=None, uniform=None):
    """
    Create a MagicMock random source with a fixed sequence of draws.

    Args:
        randoms: Values returned by successive random() calls
        randint: Fixed value for randint() (None = lower bound)
        uniform: Fixed value for uniform() (None = lower bound)
    """
    rng = MagicMock()
    rng.random.side_effect = list(randoms)
    rng.randint.side_effect = (lambda a, b: a) if randint is None else (lambda a, b: randint)
    rng.uniform.side_effect = (lambda a, b: a) if uniform is None else (lambda a, b: uniform)
    return rng


def place(context, entity):
    """Add an entity to the context as if it had just spawned."""
    return context.spawn_manager.add(entity)


@pytest.fixture
def make_rng():
    """Factory fixture around scripted_rng."""
    return scripted_rng


@pytest.fixture
def spawn_into(context):
    """Add entities to the running context: spawn_into(entity) -> entity."""
    return lambda entity: place(context, entity)


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to everything not marked integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)


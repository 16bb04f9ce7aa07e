"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import pytest
import pygame
from typing import Generator


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    This runs once before all tests and cleans up after.
    """
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def sample_screen() -> pygame.Surface:
    """
    Create a sample pygame surface for tests that need a screen.
    """
    return pygame.Surface((320, 180))


@pytest.fixture
def scene():
    """
    Create an empty Scene.
    """
    from engine.scene import Scene
    return Scene(fps=60)


@pytest.fixture
def entity(scene):
    """
    Create an entity with no components.
    """
    return scene.create_entity("sky")


@pytest.fixture
def environment_light():
    """
    Create an EnvironmentLight whose wall clock is pinned to 0.75 (18:00).
    """
    from world.time.environment_light import EnvironmentLight
    return EnvironmentLight(clock=lambda: 0.75)


@pytest.fixture
def driver(entity):
    """
    Create a DayNightDriver on the sample entity, not bound to any signal.
    """
    from systems.day_night import DayNightDriver
    return DayNightDriver(entity)


@pytest.fixture
def tmp_config(tmp_path):
    """
    Create a DayNightConfig backed by a temporary settings file.
    """
    from engine.config import DayNightConfig
    return DayNightConfig(path=tmp_path / "config" / "settings.json")

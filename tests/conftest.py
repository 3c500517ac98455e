"""Shared test fixtures."""

from typing import Callable, Iterator

import pytest

from device_map_sim.schemas import Device, MapConfig
from device_map_sim.services import EventBus, SimulationStateRegistry
from device_map_sim.vis.state import DeviceMapView

from .factories import create_device, create_map_config


@pytest.fixture
def device_factory() -> Callable[..., Device]:
    """Fixture that returns the device factory function."""
    return create_device


@pytest.fixture
def map_config_factory() -> Callable[..., MapConfig]:
    """Fixture that returns the map config factory function."""
    return create_map_config


@pytest.fixture
def registry() -> SimulationStateRegistry:
    """Return a private, empty registry."""
    return SimulationStateRegistry()


@pytest.fixture
def bus() -> EventBus:
    """Return a private event bus."""
    return EventBus()


@pytest.fixture
def view(registry: SimulationStateRegistry, bus: EventBus) -> Iterator[DeviceMapView]:
    """Return an activated view that is deactivated after the test."""
    v = DeviceMapView(registry, bus)
    v.activate()
    yield v
    v.deactivate()

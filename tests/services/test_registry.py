"""Tests for the simulation state registry and its observer fan-out."""

import logging

from device_map_sim.services import SimulationStateRegistry
from device_map_sim.services.registry import DeviceObserver

from ..factories import RecordingObserver


class FailingObserver:
    def on_notify(self, devices) -> None:
        raise RuntimeError("boom")


def test_registry_starts_empty() -> None:
    registry = SimulationStateRegistry()
    assert registry.devices == []
    assert registry.observer_count == 0


def test_double_registration_delivers_once(registry, device_factory) -> None:
    observer = RecordingObserver()
    registry.register_observer(observer)
    registry.register_observer(observer)

    registry.update([device_factory()])

    assert registry.observer_count == 1
    assert len(observer.calls) == 1


def test_remove_unregistered_is_noop(registry) -> None:
    registry.register_observer(RecordingObserver("a"))

    registry.remove_observer(RecordingObserver("b"))

    assert registry.observer_count == 1


def test_removed_observer_no_longer_notified(registry, device_factory) -> None:
    observer = RecordingObserver()
    registry.register_observer(observer)
    registry.remove_observer(observer)

    registry.update([device_factory()])

    assert observer.calls == []


def test_notify_in_registration_order(registry) -> None:
    log: list[str] = []
    for name in ("first", "second", "third"):
        registry.register_observer(RecordingObserver(name, log))

    registry.notify()

    assert log == ["first", "second", "third"]


def test_notify_delivers_full_collection(registry, device_factory) -> None:
    observer = RecordingObserver()
    registry.register_observer(observer)
    devices = [device_factory(name="a"), device_factory(name="b", visible=False)]

    registry.update(devices)

    assert observer.calls == [devices]


def test_failing_observer_does_not_starve_others(registry, caplog) -> None:
    """One observer raising must not stop the fan-out."""
    before = RecordingObserver("before")
    after = RecordingObserver("after")
    registry.register_observer(before)
    registry.register_observer(FailingObserver())
    registry.register_observer(after)

    with caplog.at_level(logging.ERROR):
        delivered = registry.notify()

    assert delivered == 2
    assert len(before.calls) == 1
    assert len(after.calls) == 1
    assert "failed on notify" in caplog.text


def test_observer_may_deregister_during_notify(registry) -> None:
    class OneShot:
        def __init__(self) -> None:
            self.count = 0

        def on_notify(self, devices) -> None:
            self.count += 1
            registry.remove_observer(self)

    one_shot = OneShot()
    other = RecordingObserver()
    registry.register_observer(one_shot)
    registry.register_observer(other)

    registry.notify()
    registry.notify()

    assert one_shot.count == 1
    assert len(other.calls) == 2


def test_update_validates_dict_payload(registry) -> None:
    registry.update(
        [
            {
                "name": "d1",
                "visible": True,
                "position": {"x": 1, "y": 2, "z": 0},
                "orientation": {"yaw": 0, "pitch": 0, "roll": 0},
            },
            {"visible": True},  # no name: dropped
        ]
    )

    assert [d.name for d in registry.devices] == ["d1"]
    assert registry.devices[0].position.y == 2


def test_devices_property_returns_copy(registry, device_factory) -> None:
    registry.update([device_factory()])

    registry.devices.clear()

    assert len(registry.devices) == 1


def test_update_device_patches_and_notifies(registry, device_factory) -> None:
    observer = RecordingObserver()
    registry.update([device_factory(name="a", x=1, y=1), device_factory(name="b")])
    registry.register_observer(observer)

    ok = registry.update_device("a", position={"x": 5}, visible=False)

    assert ok
    patched = registry.devices[0]
    assert (patched.position.x, patched.position.y) == (5, 1)
    assert patched.visible is False
    assert len(observer.calls) == 1


def test_update_device_unknown_name(registry, caplog) -> None:
    observer = RecordingObserver()
    registry.register_observer(observer)

    with caplog.at_level(logging.WARNING):
        assert registry.update_device("missing", visible=False) is False

    assert observer.calls == []
    assert "no device named" in caplog.text


def test_update_device_rejects_invalid_changes(registry, device_factory) -> None:
    registry.update([device_factory(name="a")])

    assert registry.update_device("a", position={"x": "not a number"}) is False
    assert registry.devices[0].position.x == 0


def test_clear_notifies_empty_collection(registry, device_factory) -> None:
    observer = RecordingObserver()
    registry.update([device_factory()])
    registry.register_observer(observer)

    registry.clear()

    assert observer.calls == [[]]


def test_observer_protocol() -> None:
    assert isinstance(RecordingObserver(), DeviceObserver)


def test_update_drops_non_finite_coordinates(registry) -> None:
    registry.update(
        [
            {"name": "nan", "position": {"x": float("nan")}, "orientation": {}},
            {"name": "inf", "position": {}, "orientation": {"roll": float("inf")}},
            {"name": "ok", "position": {"x": 1}, "orientation": {}},
        ]
    )

    assert [d.name for d in registry.devices] == ["ok"]

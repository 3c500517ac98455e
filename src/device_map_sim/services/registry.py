"""Simulation state registry - the shared device collection and its observers.

The registry is the single source of truth for the current device
collection. Views opt in with `register_observer` and opt out with
`remove_observer`; the registry never owns their lifecycle.
"""

import logging
from typing import Any, Iterable, Protocol, runtime_checkable

from pydantic import ValidationError

from device_map_sim.schemas import Device, DeviceCollection, parse_devices

logger = logging.getLogger(__name__)


@runtime_checkable
class DeviceObserver(Protocol):
    """Anything that wants the full device collection after every update."""

    def on_notify(self, devices: DeviceCollection) -> None: ...


class SimulationStateRegistry:
    """Publisher of the current device collection.

    Notification is synchronous and follows registration order. An observer
    that raises is logged and skipped; the remaining observers are still
    notified.
    """

    def __init__(self, devices: Iterable[Any] | None = None) -> None:
        self._devices: DeviceCollection = parse_devices(devices or [])
        self._observers: list[DeviceObserver] = []

    @property
    def devices(self) -> DeviceCollection:
        """Copy of the current device collection."""
        return list(self._devices)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def is_registered(self, observer: DeviceObserver) -> bool:
        return any(o is observer for o in self._observers)

    def register_observer(self, observer: DeviceObserver) -> None:
        """Add an observer. Registering twice is a no-op."""
        if self.is_registered(observer):
            logger.debug(f"Observer {observer!r} already registered")
            return
        self._observers.append(observer)
        logger.debug(
            f"Registered observer {observer!r} ({len(self._observers)} total)"
        )

    def remove_observer(self, observer: DeviceObserver) -> None:
        """Remove an observer. Removing an unknown observer is a no-op."""
        for idx, o in enumerate(self._observers):
            if o is observer:
                del self._observers[idx]
                logger.debug(
                    f"Removed observer {observer!r} ({len(self._observers)} left)"
                )
                return
        logger.debug(f"Observer {observer!r} was not registered")

    def notify(self, devices: DeviceCollection | None = None) -> int:
        """Deliver the full device collection to every observer.

        Args:
            devices: Collection to deliver. Defaults to the stored collection.

        Returns:
            Number of observers that handled the notification without error.
        """
        payload = self.devices if devices is None else list(devices)
        delivered = 0
        # Snapshot so observers may deregister while being notified
        for observer in list(self._observers):
            try:
                observer.on_notify(list(payload))
                delivered += 1
            except Exception as e:
                logger.error(
                    f"Observer {observer!r} failed on notify: {e}", exc_info=True
                )
        return delivered

    def update(self, devices: Iterable[Any]) -> int:
        """Replace the device collection and notify all observers."""
        self._devices = parse_devices(devices)
        logger.debug(f"Device collection updated: {len(self._devices)} devices")
        return self.notify()

    def update_device(self, name: str, **changes: Any) -> bool:
        """Patch the first device called `name` and notify all observers.

        Nested `position` / `orientation` changes may be given as dicts and
        are merged into the existing values.

        Returns:
            False if no device has that name, True otherwise.
        """
        for idx, device in enumerate(self._devices):
            if device.name != name:
                continue
            data = device.model_dump()
            for key, value in changes.items():
                if isinstance(value, dict) and isinstance(data.get(key), dict):
                    data[key] = {**data[key], **value}
                else:
                    data[key] = value
            try:
                self._devices[idx] = Device.model_validate(data)
            except ValidationError as e:
                logger.warning(f"update_device: rejected changes for '{name}': {e}")
                return False
            self.notify()
            return True

        logger.warning(f"update_device: no device named '{name}'")
        return False

    def clear(self) -> None:
        """Empty the device collection and notify observers."""
        self._devices = []
        self.notify()

"""Named-topic event bus for UI trigger signals.

Buttons and other controls emit a topic; any number of map views listen.
Emitters never hold a reference to the listeners.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

# Topic names
CYCLE_BACKGROUND = "map-button-clicked"
TOGGLE_ISOMETRIC = "isometric-button-clicked"

Handler = Callable[[], None]


class EventBus:
    """Broadcast channel with named topics and payload-free signals."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def subscribe(self, topic: str, handler: Handler) -> None:
        """Attach a handler to a topic. Subscribing twice is a no-op."""
        handlers = self._handlers.setdefault(topic, [])
        if handler in handlers:
            return
        handlers.append(handler)

    def unsubscribe(self, topic: str, handler: Handler) -> None:
        """Detach a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(topic)
        if handlers and handler in handlers:
            handlers.remove(handler)
        if not handlers:
            self._handlers.pop(topic, None)

    @property
    def topics(self) -> list[str]:
        """Topics that currently have at least one handler."""
        return list(self._handlers)

    def listener_count(self, topic: str) -> int:
        return len(self._handlers.get(topic, []))

    def emit(self, topic: str) -> int:
        """Fire a topic. Returns the number of handlers that ran cleanly."""
        handled = 0
        for handler in list(self._handlers.get(topic, [])):
            try:
                handler()
                handled += 1
            except Exception as e:
                logger.error(f"Handler for '{topic}' failed: {e}", exc_info=True)
        logger.debug(f"Emitted '{topic}' to {handled} handler(s)")
        return handled

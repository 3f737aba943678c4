"""Polling loop that drives the dispatcher.

One fetch-then-process cycle at a time; events are handled in order and a
failing event never blocks the rest of its batch.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from core.config import PollingConfig
from core.dispatcher import EventDispatcher
from core.errors import TransportError

LOGGER = logging.getLogger(__name__)


class Consumer:
    """Repeatedly fetches events and processes them."""

    def __init__(self, dispatcher: EventDispatcher, config: PollingConfig) -> None:
        self._dispatcher = dispatcher
        self._config = config
        self._stop_event = threading.Event()

    def run_once(self) -> int:
        """Run a single cycle and return the number of events fetched."""

        try:
            events = self._dispatcher.fetch(self._config.batch_size)
        except TransportError:
            LOGGER.exception("Failed to fetch updates")
            return 0

        for event in events:
            try:
                self._dispatcher.process(event)
            except Exception:
                LOGGER.exception("Error while processing %s event", event.type.value)

        return len(events)

    def run(self, stop_event: Optional[threading.Event] = None) -> None:
        """Poll until ``stop_event`` (or stop()) is set."""

        if stop_event is not None:
            self._stop_event = stop_event

        LOGGER.info("Polling for updates (batch size %s)", self._config.batch_size)
        while not self._stop_event.is_set():
            if self.run_once() == 0:
                # Nothing new or fetch failed; wait before asking again.
                self._stop_event.wait(self._config.poll_interval)
        LOGGER.info("Consumer stopped at offset %s", self._dispatcher.offset)

    def stop(self) -> None:
        self._stop_event.set()

"""
Message Bus Infrastructure

Architectural Intent:
- In-process, synchronous bus routing messages to producers by endpoint name
- Stands in for the host messaging framework: the producer runs on the
  caller's thread and the processed message is returned
- Faulted messages are handed to dead-letter handlers after processing; the
  bus itself never inspects bodies
"""

import logging
from typing import Callable, Protocol

from cloudlink.domain.ports.message_port import MessagePort

logger = logging.getLogger(__name__)


class Producer(Protocol):
    def process(self, message: MessagePort) -> MessagePort: ...


class MessageBus:
    def __init__(self, dead_letter: bool = True) -> None:
        self.dead_letter = dead_letter
        self._producers: dict[str, Producer] = {}
        self._dead_letter_handlers: list[Callable[[str, MessagePort], None]] = []

    @property
    def endpoints(self) -> list[str]:
        return sorted(self._producers)

    def register(self, endpoint: str, producer: Producer) -> None:
        if endpoint in self._producers:
            raise ValueError(f"Endpoint already registered: {endpoint}")
        self._producers[endpoint] = producer

    def subscribe_dead_letter(self, handler: Callable[[str, MessagePort], None]) -> None:
        self._dead_letter_handlers.append(handler)

    def send(self, endpoint: str, message: MessagePort) -> MessagePort:
        producer = self._producers.get(endpoint)
        if producer is None:
            logger.warning("No producer registered for %s", endpoint)
            message.set_fault(True)
            message.set_body(f"no producer registered for {endpoint}")
        else:
            producer.process(message)

        if message.fault and self.dead_letter:
            for handler in self._dead_letter_handlers:
                handler(endpoint, message)
        return message

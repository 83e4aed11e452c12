"""Publishing of messages to sinks."""

from __future__ import annotations

import time
from dataclasses import dataclass

from predator.contracts import Message, MessageProvider, PublisherType, Sink, SinkConfig


class Publisher:
    """Publish messages produced by message providers to a sink."""

    def __init__(self, sink: Sink) -> None:
        self._sink = sink

    def publish(self, provider: MessageProvider) -> None:
        """Build the provider's message and hand it to the sink."""
        message = provider.get()
        self._sink.sink(message)

    def close(self) -> None:
        """Close the underlying sink."""
        self._sink.close()


def _log(value: object) -> None:
    stamp = time.strftime("%Y/%m/%d %H:%M:%S")
    print(f"INFO: {stamp} {value}")


@dataclass
class ConsoleSink:
    """Write messages to standard output."""

    def sink(self, message: Message) -> None:
        _log(message.key)
        _log(message.value)

    def close(self) -> None:
        return None


@dataclass
class DummySink:
    """Discard every message."""

    def sink(self, message: Message) -> None:
        return None

    def close(self) -> None:
        return None


class SinkFactory:
    """Create sinks from their configuration."""

    def create(self, config: SinkConfig) -> Sink:
        """Sink for the configured publisher type; raises ValueError when unavailable."""
        if config.type == PublisherType.CONSOLE:
            return ConsoleSink()
        if config.type == PublisherType.DUMMY:
            return DummySink()
        if config.type == PublisherType.KAFKA:
            raise ValueError("kafka sink is not available in this installation")
        raise ValueError(f"unsupported publisher type {config.type}")
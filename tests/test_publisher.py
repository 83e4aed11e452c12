import pytest

from predator.contracts import Message, PublisherType, SinkConfig
from predator.publisher import ConsoleSink, DummySink, Publisher, SinkFactory


class FakeProvider:
    def __init__(self, message=None, error=None):
        self.message = message
        self.error = error
        self.calls = 0

    def get(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.message


class FakeSink:
    def __init__(self, error=None):
        self.error = error
        self.received = []
        self.closed = False

    def sink(self, message):
        self.received.append(message)
        if self.error is not None:
            raise self.error

    def close(self):
        self.closed = True


def test_publish_sends_message_to_sink():
    message = Message()
    provider = FakeProvider(message=message)
    sink = FakeSink()
    Publisher(sink).publish(provider)
    assert provider.calls == 1
    assert sink.received == [message]
    assert sink.received[0] is message


def test_publish_raises_when_build_message_failed():
    provider = FakeProvider(error=RuntimeError("build message failed"))
    sink = FakeSink()
    with pytest.raises(RuntimeError, match="build message failed"):
        Publisher(sink).publish(provider)
    assert sink.received == []


def test_publish_raises_when_sink_failed():
    provider = FakeProvider(message=Message())
    sink = FakeSink(error=RuntimeError("sinkfailed"))
    with pytest.raises(RuntimeError, match="sinkfailed"):
        Publisher(sink).publish(provider)


def test_close_closes_sink():
    sink = FakeSink()
    Publisher(sink).close()
    assert sink.closed is True


def test_factory_creates_console_sink_that_prints(capsys):
    sink = SinkFactory().create(SinkConfig(type=PublisherType.CONSOLE))
    assert isinstance(sink, ConsoleSink)
    sink.sink(Message(key="the-key", value="the-value"))
    out = capsys.readouterr().out
    assert "INFO: " in out
    assert "the-key" in out
    assert "the-value" in out


def test_factory_creates_dummy_sink_that_discards(capsys):
    sink = SinkFactory().create(SinkConfig(type=PublisherType.DUMMY))
    assert isinstance(sink, DummySink)
    sink.sink(Message(key="k", value="v"))
    assert capsys.readouterr().out == ""


def test_factory_rejects_kafka_without_support():
    config = SinkConfig(type=PublisherType.KAFKA, broker=["abc"], topic="def")
    with pytest.raises(ValueError):
        SinkFactory().create(config)


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError, match="unsupported"):
        SinkFactory().create(SinkConfig(type="carrier-pigeon"))
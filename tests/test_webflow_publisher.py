"""Tests for the Webflow batch publisher."""

import json

import httpx
import pytest

from floorplan_sync.exceptions import DestinationError
from floorplan_sync.models.item import DestinationItem
from floorplan_sync.publishers.webflow import WebflowPublisher, chunked


def _items(n: int) -> list[DestinationItem]:
    return [DestinationItem(name=f"Item {i}", slug=f"item-{i}") for i in range(n)]


def _created(request: httpx.Request) -> httpx.Response:
    items = json.loads(request.content)["items"]
    return httpx.Response(202, json={"items": [{"id": f"id-{i}"} for i in range(len(items))]})


class SleepRecorder:
    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


def _publisher(transport: httpx.MockTransport, sleeper: SleepRecorder, **kwargs) -> WebflowPublisher:
    return WebflowPublisher(
        "wf-token",
        client=httpx.Client(transport=transport),
        sleep=sleeper,
        **kwargs,
    )


class TestChunked:
    """Tests for chunked."""

    def test_sizes(self) -> None:
        assert [len(c) for c in chunked(list(range(250)), 100)] == [100, 100, 50]

    def test_exact_multiple(self) -> None:
        assert [len(c) for c in chunked(list(range(200)), 100)] == [100, 100]

    def test_empty(self) -> None:
        assert list(chunked([], 100)) == []

    def test_order_preserved(self) -> None:
        assert [list(c) for c in chunked([1, 2, 3, 4, 5], 2)] == [[1, 2], [3, 4], [5]]

    def test_invalid_size(self) -> None:
        with pytest.raises(ValueError):
            list(chunked([1], 0))


class TestWebflowPublisherBatches:
    """Tests for batching and pacing."""

    def test_250_items_three_requests_two_delays(self, make_transport, sleeper: SleepRecorder) -> None:
        """250 items -> requests of [100, 100, 50] and exactly 2 delays."""
        transport = make_transport(_created)
        result = _publisher(transport, sleeper).publish("coll-1", _items(250))

        assert [len(b["items"]) for b in transport.bodies()] == [100, 100, 50]
        assert sleeper.calls == [1.0, 1.0]
        assert result.batches_sent == 3
        assert result.items_sent == 250
        assert result.items_created == 250

    def test_single_batch_no_delay(self, make_transport, sleeper: SleepRecorder) -> None:
        """One batch means no delay."""
        transport = make_transport(_created)
        _publisher(transport, sleeper).publish("coll-1", _items(100))
        assert len(transport.requests) == 1
        assert sleeper.calls == []

    def test_items_in_order(self, make_transport, sleeper: SleepRecorder) -> None:
        """Items are sent in input order across batches."""
        transport = make_transport(_created)
        _publisher(transport, sleeper, batch_size=2).publish("coll-1", _items(5))
        slugs = [i["fieldData"]["slug"] for b in transport.bodies() for i in b["items"]]
        assert slugs == [f"item-{i}" for i in range(5)]

    def test_custom_delay(self, make_transport, sleeper: SleepRecorder) -> None:
        transport = make_transport(_created)
        _publisher(transport, sleeper, batch_size=10, batch_delay=2.5).publish("c", _items(25))
        assert sleeper.calls == [2.5, 2.5]

    def test_empty_is_noop(self, make_transport, sleeper: SleepRecorder) -> None:
        """No items: no request, no delay."""
        transport = make_transport(_created)
        result = _publisher(transport, sleeper).publish("coll-1", [])
        assert transport.requests == []
        assert sleeper.calls == []
        assert result.batches_sent == 0

    def test_batch_size_cap(self) -> None:
        """Batch size above the endpoint cap is rejected."""
        with pytest.raises(ValueError):
            WebflowPublisher("t", batch_size=101)


class TestWebflowPublisherRequest:
    """Tests for request shape."""

    def test_endpoint_and_auth(self, make_transport, sleeper: SleepRecorder) -> None:
        """Bearer token and collection endpoint are used."""
        transport = make_transport(_created)
        _publisher(transport, sleeper).publish("coll-1", _items(1))
        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.webflow.com/v2/collections/coll-1/items"
        assert request.headers["Authorization"] == "Bearer wf-token"
        body = transport.bodies()[0]
        assert body["items"][0]["fieldData"]["name"] == "Item 0"
        assert body["items"][0]["isDraft"] is False

    def test_live_mode(self, make_transport, sleeper: SleepRecorder) -> None:
        """Live mode posts to the /items/live endpoint."""
        transport = make_transport(_created)
        _publisher(transport, sleeper, write_mode="live").publish("coll-1", _items(1))
        assert transport.requests[0].url.path == "/v2/collections/coll-1/items/live"

    def test_created_count_fallback(self, make_transport, sleeper: SleepRecorder) -> None:
        """Without an items array in the response, the batch size is counted."""
        transport = make_transport(lambda r: httpx.Response(200, json={}))
        result = _publisher(transport, sleeper).publish("c", _items(3))
        assert result.items_created == 3


class TestWebflowPublisherFailure:
    """Tests for failure propagation."""

    def test_failure_on_batch_two_stops_batch_three(self, make_transport, sleeper: SleepRecorder) -> None:
        """A non-2xx on batch 2 of 3 raises and batch 3 is never sent."""
        calls = {"n": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["n"] += 1
            if calls["n"] == 2:
                return httpx.Response(429, text='{"message": "Too many requests"}')
            return _created(request)

        transport = make_transport(handler)
        with pytest.raises(DestinationError) as exc_info:
            _publisher(transport, sleeper).publish("coll-1", _items(250))

        assert len(transport.requests) == 2
        assert sleeper.calls == [1.0]
        assert exc_info.value.status_code == 429
        assert "Too many requests" in exc_info.value.body
        assert "Webflow API failed: 429" in str(exc_info.value)

    def test_failure_first_batch(self, make_transport, sleeper: SleepRecorder) -> None:
        transport = make_transport(lambda r: httpx.Response(400, text="Validation Error"))
        with pytest.raises(DestinationError):
            _publisher(transport, sleeper).publish("coll-1", _items(10))
        assert sleeper.calls == []


class TestWebflowPublisherFromSettings:
    """Tests for from_settings."""

    def test_from_settings(self, settings) -> None:
        publisher = WebflowPublisher.from_settings(settings)
        assert publisher.batch_size == 100
        assert publisher.batch_delay == 0
        assert publisher.write_mode == "staged"

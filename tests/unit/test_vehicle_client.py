"""Unit tests for the HTTP vehicle lookup."""

from collections.abc import Callable

import httpx
import pytest

from threadpilot.core.config import Settings
from threadpilot.core.result_types import Err, Ok
from threadpilot.services.vehicle_client import HttpVehicleLookup, RetryConfig
from tests.fixtures.test_data import VOLVO

NO_DELAY = RetryConfig(max_attempts=3, initial_delay_seconds=0.0)

Handler = Callable[[httpx.Request], httpx.Response]


def _lookup(handler: Handler, retry: RetryConfig = NO_DELAY) -> HttpVehicleLookup:
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://vehicles.test"
    )
    return HttpVehicleLookup(client, retry)


def _volvo_response(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json=VOLVO.model_dump(mode="json", by_alias=True))


class TestRetryConfig:
    def test_exponential_backoff(self) -> None:
        retry = RetryConfig(initial_delay_seconds=0.2)

        assert retry.delay_before(1) == pytest.approx(0.2)
        assert retry.delay_before(2) == pytest.approx(0.4)
        assert retry.delay_before(3) == pytest.approx(0.8)

    def test_constant_backoff(self) -> None:
        retry = RetryConfig(initial_delay_seconds=0.5, exponential_backoff=False)

        assert retry.delay_before(3) == pytest.approx(0.5)


class TestHttpVehicleLookup:
    async def test_found(self) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.path)
            return _volvo_response(request)

        lookup = _lookup(handler)

        result = await lookup.get_vehicle_info("ABC123")

        assert result == Ok(VOLVO)
        assert requested == ["/api/v1/vehicles/ABC123"]
        await lookup.aclose()

    async def test_registration_number_is_path_quoted(self) -> None:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(request.url.raw_path.decode())
            return httpx.Response(404)

        lookup = _lookup(handler)

        await lookup.get_vehicle_info("AB/12")

        assert requested == ["/api/v1/vehicles/AB%2F12"]

    async def test_not_found(self) -> None:
        lookup = _lookup(lambda request: httpx.Response(404, json={"status": 404}))

        assert await lookup.get_vehicle_info("XYZ999") == Ok(None)

    async def test_client_error_is_not_retried(self) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(400)

        lookup = _lookup(handler)

        result = await lookup.get_vehicle_info("ABC-123")

        assert result == Err("Vehicle service returned HTTP 400")
        assert calls == 1

    async def test_server_error_is_retried_until_success(self) -> None:
        failures = [503, 500]

        def handler(request: httpx.Request) -> httpx.Response:
            if failures:
                return httpx.Response(failures.pop(0))
            return _volvo_response(request)

        lookup = _lookup(handler)

        assert await lookup.get_vehicle_info("ABC123") == Ok(VOLVO)

    async def test_gives_up_after_max_attempts(self) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(502)

        lookup = _lookup(handler)

        result = await lookup.get_vehicle_info("ABC123")

        assert result == Err("Vehicle service returned HTTP 502")
        assert calls == NO_DELAY.max_attempts

    async def test_transport_error_is_retried(self) -> None:
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            if calls == 1:
                raise httpx.ConnectError("connection refused", request=request)
            return _volvo_response(request)

        lookup = _lookup(handler)

        assert await lookup.get_vehicle_info("ABC123") == Ok(VOLVO)
        assert calls == 2

    async def test_unreachable_service_is_err(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        lookup = _lookup(handler, RetryConfig(max_attempts=2, initial_delay_seconds=0.0))

        result = await lookup.get_vehicle_info("ABC123")

        assert isinstance(result, Err)
        assert "Vehicle service request failed" in result.error

    @pytest.mark.parametrize(
        "payload",
        [
            {"registrationNumber": "ABC123"},
            {"unexpected": True},
        ],
    )
    async def test_malformed_payload_is_err(self, payload: dict[str, object]) -> None:
        lookup = _lookup(lambda request: httpx.Response(200, json=payload))

        result = await lookup.get_vehicle_info("ABC123")

        assert isinstance(result, Err)
        assert result.error.startswith("Invalid vehicle payload")

    async def test_non_json_body_is_err(self) -> None:
        lookup = _lookup(lambda request: httpx.Response(200, text="<html>oops</html>"))

        result = await lookup.get_vehicle_info("ABC123")

        assert isinstance(result, Err)


class TestFromSettings:
    async def test_builds_client_from_settings(self) -> None:
        settings = Settings(
            vehicle_service_base_url="http://vehicles.internal:8001",
            vehicle_service_max_attempts=5,
        )

        lookup = HttpVehicleLookup.from_settings(settings)

        assert lookup._client.base_url.host == "vehicles.internal"
        assert lookup._client.base_url.port == 8001
        assert lookup._retry.max_attempts == 5
        await lookup.aclose()
        assert lookup._client.is_closed

    def test_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="vehicle_service_base_url"):
            HttpVehicleLookup.from_settings(Settings(vehicle_service_base_url=None))

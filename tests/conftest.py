"""Pytest configuration and shared fixtures."""
import asyncio

import pytest

from notiva.availability import AvailabilityRegistry, CredentialStore
from notiva.backends import (
    BackendClients,
    EncyclopediaClient,
    EncyclopediaResult,
    EncyclopediaSummary,
    GenerativeChatClient,
    GeocodingClient,
    GeocodingResult,
    GeoLocation,
    WeatherClient,
    WeatherForecast,
    WeatherResult,
)
from notiva.history import MessageHistoryTracker
from notiva.orchestrator import BackendOrchestrator

FORECAST_PAYLOAD = {
    "type": "Feature",
    "properties": {
        "meta": {"updated_at": "2024-05-01T10:00:00Z"},
        "timeseries": [
            {
                "time": "2024-05-01T10:00:00Z",
                "data": {
                    "instant": {
                        "details": {
                            "air_pressure_at_sea_level": 1012.4,
                            "air_temperature": 12.3,
                            "cloud_area_fraction": 75.0,
                            "relative_humidity": 81.2,
                            "wind_from_direction": 210.5,
                            "wind_speed": 4.1,
                        }
                    },
                    "next_1_hours": {
                        "summary": {"symbol_code": "lightrain"},
                        "details": {"precipitation_amount": 0.4},
                    },
                },
            }
        ],
    },
}


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class FakeWeatherClient(WeatherClient):
    def __init__(self, result: WeatherResult | None = None, error: Exception | None = None):
        self.result = result or WeatherResult(
            success=True,
            status_code=200,
            body=WeatherForecast.model_validate(FORECAST_PAYLOAD),
        )
        self.error = error
        self.calls: list[tuple[float, float]] = []
        self.closed = False

    async def get_weather(self, lat: float, lon: float) -> WeatherResult:
        self.calls.append((lat, lon))
        if self.error:
            raise self.error
        return self.result

    async def close(self) -> None:
        self.closed = True


class FakeGeocodingClient(GeocodingClient):
    def __init__(self, result: GeocodingResult | None = None, error: Exception | None = None):
        self.result = result or GeocodingResult(
            success=True,
            results=[GeoLocation(lat=41.0082, lon=28.9784, display_name="İstanbul, Türkiye")],
        )
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def search(self, query: str) -> GeocodingResult:
        self.calls.append(query)
        if self.error:
            raise self.error
        return self.result

    async def close(self) -> None:
        self.closed = True


class FakeEncyclopediaClient(EncyclopediaClient):
    def __init__(self, result: EncyclopediaResult | None = None, error: Exception | None = None):
        self.result = result or EncyclopediaResult(
            success=True,
            status_code=200,
            body=EncyclopediaSummary(
                title="Mustafa Kemal Atatürk",
                extract="Mustafa Kemal Atatürk, Türk mareşal ve devlet adamıdır.",
            ),
        )
        self.error = error
        self.calls: list[str] = []
        self.closed = False

    async def get_summary(self, title: str) -> EncyclopediaResult:
        self.calls.append(title)
        if self.error:
            raise self.error
        return self.result

    async def close(self) -> None:
        self.closed = True


class FakeGenerativeClient(GenerativeChatClient):
    """Returns (or raises) the queued outcomes in order.

    If ``gate`` is set, each call waits for it before answering.
    """

    def __init__(self, outcomes: list[str | Exception] | None = None, gate: asyncio.Event | None = None):
        self.outcomes = list(outcomes if outcomes is not None else ["Merhaba, ben bir asistanım."])
        self.gate = gate
        self.api_keys: list[str] = []
        self.prompts: list[str] = []
        self.closed = False

    def initialize(self, api_key: str) -> None:
        self.api_keys.append(api_key)

    async def generate_content(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def credentials():
    """Both keyed backends configured."""
    return CredentialStore(weather_key="weather-key", generative_key="gemini-key")


@pytest.fixture
def registry(credentials, clock):
    return AvailabilityRegistry(credentials, clock=clock)


@pytest.fixture
def history():
    return MessageHistoryTracker()


@pytest.fixture
def weather_client():
    return FakeWeatherClient()


@pytest.fixture
def geocoding_client():
    return FakeGeocodingClient()


@pytest.fixture
def encyclopedia_client():
    return FakeEncyclopediaClient()


@pytest.fixture
def generative_client():
    return FakeGenerativeClient()


@pytest.fixture
def clients(weather_client, geocoding_client, encyclopedia_client, generative_client):
    return BackendClients(
        weather=weather_client,
        geocoding=geocoding_client,
        encyclopedia=encyclopedia_client,
        generative_chat=generative_client,
    )


@pytest.fixture
def orchestrator(clients, registry, history, sleep):
    return BackendOrchestrator(clients=clients, registry=registry, history=history, sleep=sleep)

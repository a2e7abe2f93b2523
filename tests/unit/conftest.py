"""
Configurações e fixtures compartilhadas para testes unitários
"""
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from domain.entities.weather_snapshot import (
    Temperature,
    WeatherCondition,
    WeatherSnapshot,
    WindInfo,
)
from domain.value_objects.coordinates import Coordinates

FIXTURES_PATH = Path(__file__).parent.parent / 'fixtures'


@pytest.fixture
def owm_responses():
    """Respostas reais (anonimizadas) da API OpenWeatherMap"""
    with open(FIXTURES_PATH / 'openweathermap_sample_responses.json', 'r', encoding='utf-8') as f:
        return json.load(f)


@pytest.fixture
def make_snapshot():
    """
    Factory fixture para criar WeatherSnapshot com valores padrão

    Usage:
        def test_something(make_snapshot):
            snapshot = make_snapshot(place_name='London', wind_speed=5.0)
    """
    def _make(
        place_name: str = 'San Francisco',
        latitude: float = 37.7749,
        longitude: float = -122.4194,
        temp: float = 20.0,
        feels_like: float = 19.0,
        temp_min: float = 15.0,
        temp_max: float = 25.0,
        code: int = 800,
        category: str = 'Clear',
        description: str = 'clear sky',
        icon: str = '01d',
        wind_speed: float = 5.0,
        wind_direction: int = 0,
        humidity: int = 65,
        visibility: int = 10000,
        observed_at: datetime = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc),
        utc_offset_seconds: int = -28800
    ) -> WeatherSnapshot:
        return WeatherSnapshot(
            place_name=place_name,
            coordinates=Coordinates(latitude=latitude, longitude=longitude),
            temperature=Temperature(
                current=temp,
                feels_like=feels_like,
                minimum=temp_min,
                maximum=temp_max
            ),
            condition=WeatherCondition(
                code=code,
                category=category,
                description=description,
                icon=icon
            ),
            wind=WindInfo(speed=wind_speed, direction=wind_direction),
            humidity=humidity,
            visibility=visibility,
            observed_at=observed_at,
            utc_offset_seconds=utc_offset_seconds
        )

    return _make


class RecordingWeatherService:
    """Stub de WeatherService que registra chamadas"""

    def __init__(self, snapshot=None, error=None):
        self.snapshot = snapshot
        self.error = error
        self.coordinates_calls = []
        self.place_calls = []

    async def get_by_coordinates(self, latitude, longitude):
        self.coordinates_calls.append((latitude, longitude))
        return self._result()

    async def get_by_place(self, identifier):
        self.place_calls.append(identifier)
        return self._result()

    def _result(self):
        if self.error is not None:
            raise self.error
        if self.snapshot is None:
            raise RuntimeError("No weather data configured")
        return self.snapshot

    @property
    def called(self) -> bool:
        return bool(self.coordinates_calls or self.place_calls)


@pytest.fixture
def recording_service(make_snapshot):
    """WeatherService stub com snapshot padrão"""
    return RecordingWeatherService(snapshot=make_snapshot())

"""
Unit Tests: OpenWeatherMap Provider (HTTP)
"""
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from domain.exceptions import DecodingError, TransportError
from infrastructure.adapters.output.providers.openweathermap import (
    OpenWeatherMapProvider,
    OpenWeatherMapProviderAdapter,
)
from infrastructure.adapters.output.providers.openweathermap.models import OpenWeatherMapAPIResponse


def _mock_session(status=200, payload=None, json_error=None):
    """Mock de sessão aiohttp cujo get() devolve uma resposta fixa"""
    mock_response = AsyncMock()
    mock_response.status = status
    if json_error is not None:
        mock_response.json = AsyncMock(side_effect=json_error)
    else:
        mock_response.json = AsyncMock(return_value=payload)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=False)

    mock_session = MagicMock()
    mock_session.get = MagicMock(return_value=mock_response)
    return mock_session


@pytest.fixture
def provider():
    """Provider com URL explícita e session manager mockado"""
    return OpenWeatherMapProvider(
        api_key="test_api_key",
        base_url="https://api.openweathermap.org",
        path="/data/2.5/weather",
        session_manager=MagicMock()
    )


class TestOpenWeatherMapProvider:

    def test_requires_api_key(self, monkeypatch):
        from shared.config import settings
        monkeypatch.setattr(settings, 'OPENWEATHERMAP_API_KEY', '')

        with pytest.raises(ValueError, match="OPENWEATHERMAP_API_KEY"):
            OpenWeatherMapProvider(api_key=None, session_manager=MagicMock())

    def test_url_is_base_plus_path(self, provider):
        assert provider.url == "https://api.openweathermap.org/data/2.5/weather"

    def test_trailing_slash_in_base_url(self):
        provider = OpenWeatherMapProvider(
            api_key="k",
            base_url="https://example.test/",
            path="/weather",
            session_manager=MagicMock()
        )
        assert provider.url == "https://example.test/weather"

    @pytest.mark.asyncio
    async def test_fetch_by_coordinates(self, provider, owm_responses):
        session = _mock_session(payload=owm_responses['london'])

        with patch.object(provider.session_manager, 'get_session', AsyncMock(return_value=session)):
            result = await provider.get_weather_data_with_coordinates(lat=51.5085, lon=-0.1257)

        assert isinstance(result, OpenWeatherMapAPIResponse)
        assert result.name == 'London'
        session.get.assert_called_once_with(
            "https://api.openweathermap.org/data/2.5/weather",
            params={
                'lat': '51.508500',
                'lon': '-0.125700',
                'units': 'metric',
                'appid': 'test_api_key'
            }
        )

    @pytest.mark.asyncio
    async def test_fetch_by_city_code(self, provider, owm_responses):
        session = _mock_session(payload=owm_responses['london'])

        with patch.object(provider.session_manager, 'get_session', AsyncMock(return_value=session)):
            await provider.get_weather_data_for_city_code(" London ")

        session.get.assert_called_once_with(
            "https://api.openweathermap.org/data/2.5/weather",
            params={'q': ' London ', 'units': 'metric', 'appid': 'test_api_key'}
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 404, 429, 500])
    async def test_non_200_status_raises_transport_error(self, provider, owm_responses, status):
        session = _mock_session(status=status, payload=owm_responses['not_found'])

        with patch.object(provider.session_manager, 'get_session', AsyncMock(return_value=session)):
            with pytest.raises(TransportError) as exc_info:
                await provider.get_weather_data_for_city_code("Atlantis")

        assert exc_info.value.details == {"status": status}

    @pytest.mark.asyncio
    async def test_invalid_json_raises_decoding_error(self, provider):
        session = _mock_session(json_error=json.JSONDecodeError("Expecting value", "<html>", 0))

        with patch.object(provider.session_manager, 'get_session', AsyncMock(return_value=session)):
            with pytest.raises(DecodingError):
                await provider.get_weather_data_for_city_code("London")

    @pytest.mark.asyncio
    async def test_schema_mismatch_raises_decoding_error(self, provider):
        session = _mock_session(payload={'name': 'London'})

        with patch.object(provider.session_manager, 'get_session', AsyncMock(return_value=session)):
            with pytest.raises(DecodingError):
                await provider.get_weather_data_with_coordinates(lat=0.0, lon=0.0)


class TestOpenWeatherMapProviderAdapter:

    @pytest.mark.asyncio
    async def test_get_by_place_returns_snapshot(self, provider, owm_responses):
        adapter = OpenWeatherMapProviderAdapter(provider)
        session = _mock_session(payload=owm_responses['london'])

        with patch.object(provider.session_manager, 'get_session', AsyncMock(return_value=session)):
            snapshot = await adapter.get_by_place("London")

        assert snapshot.place_name == 'London'
        assert snapshot.condition.icon == '04d'
        assert adapter.provider_name == "OpenWeatherMap"

    @pytest.mark.asyncio
    async def test_get_by_coordinates_with_empty_conditions(self, provider, owm_responses):
        adapter = OpenWeatherMapProviderAdapter(provider)
        session = _mock_session(payload=owm_responses['kolkata_no_conditions'])

        with patch.object(provider.session_manager, 'get_session', AsyncMock(return_value=session)):
            snapshot = await adapter.get_by_coordinates(22.5697, 88.3697)

        assert snapshot.condition.code == 0
        assert snapshot.condition.category == 'Unknown'
        assert snapshot.condition.icon == '01d'

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, provider):
        adapter = OpenWeatherMapProviderAdapter(provider)
        session = _mock_session(status=404, payload={})

        with patch.object(provider.session_manager, 'get_session', AsyncMock(return_value=session)):
            with pytest.raises(TransportError):
                await adapter.get_by_place("Atlantis")

"""
Mock Weather Data Provider - dados determinísticos para testes e preview
"""
import asyncio
from datetime import datetime, timezone
from typing import Optional

from application.ports.output.weather_provider_port import IWeatherDataProvider
from domain.entities.weather_snapshot import (
    Temperature,
    WeatherCondition,
    WeatherSnapshot,
    WindInfo,
)
from domain.exceptions import NoDataError
from domain.value_objects.coordinates import Coordinates

_DEFAULT = object()


def default_mock_snapshot() -> WeatherSnapshot:
    """Snapshot padrão (San Francisco, céu limpo)"""
    return WeatherSnapshot(
        place_name="San Francisco",
        coordinates=Coordinates(latitude=37.7749, longitude=-122.4194),
        temperature=Temperature(current=22.0, feels_like=20.0, minimum=18.0, maximum=25.0),
        condition=WeatherCondition(code=800, category="Clear", description="clear sky", icon="01d"),
        wind=WindInfo(speed=12.0, direction=270),
        humidity=58,
        visibility=10000,
        observed_at=datetime.now(tz=timezone.utc),
        utc_offset_seconds=-28800
    )


class MockWeatherDataProvider(IWeatherDataProvider):
    """
    Provider fake com latência simulada

    - Por coordenadas: devolve o snapshot com as coordenadas pedidas
    - Por lugar: devolve o snapshot com o identificador como nome do lugar
    - mock_error tem precedência sobre os dados
    - mock_data=None explícito -> NoDataError
    """

    def __init__(
        self,
        mock_data=_DEFAULT,
        mock_error: Optional[Exception] = None,
        delay: float = 0.5
    ):
        """
        Args:
            mock_data: Snapshot a retornar (padrão: default_mock_snapshot())
            mock_error: Exceção a lançar em todas as chamadas
            delay: Latência simulada em segundos
        """
        self.mock_data: Optional[WeatherSnapshot] = (
            default_mock_snapshot() if mock_data is _DEFAULT else mock_data
        )
        self.mock_error = mock_error
        self.delay = delay

    @property
    def provider_name(self) -> str:
        return "Mock"

    async def get_by_coordinates(self, latitude: float, longitude: float) -> WeatherSnapshot:
        data = await self._resolve()
        return data.with_coordinates(Coordinates(latitude=latitude, longitude=longitude))

    async def get_by_place(self, identifier: str) -> WeatherSnapshot:
        data = await self._resolve()
        return data.with_place_name(identifier)

    async def _resolve(self) -> WeatherSnapshot:
        if self.delay > 0:
            await asyncio.sleep(self.delay)

        if self.mock_error is not None:
            raise self.mock_error

        if self.mock_data is None:
            raise NoDataError("No mock data available")

        return self.mock_data

"""
Weather Service - fachada sobre o provider de dados meteorológicos
Desacopla os casos de uso da implementação concreta (HTTP, mock, etc.)
"""
from application.ports.output.weather_provider_port import IWeatherDataProvider
from domain.entities.weather_snapshot import WeatherSnapshot


class WeatherService:
    """Delega para o provider injetado; erros propagam sem alteração."""

    def __init__(self, provider: IWeatherDataProvider):
        self.provider = provider

    async def get_by_coordinates(self, latitude: float, longitude: float) -> WeatherSnapshot:
        return await self.provider.get_by_coordinates(latitude, longitude)

    async def get_by_place(self, identifier: str) -> WeatherSnapshot:
        return await self.provider.get_by_place(identifier)

"""
OpenWeatherMap Provider Adapter - expõe OpenWeatherMapProvider pela porta IWeatherDataProvider
"""
from application.ports.output.weather_provider_port import IWeatherDataProvider
from domain.entities.weather_snapshot import WeatherSnapshot
from infrastructure.adapters.output.providers.openweathermap.mappers import OpenWeatherMapDataMapper
from infrastructure.adapters.output.providers.openweathermap.openweathermap_provider import OpenWeatherMapProvider


class OpenWeatherMapProviderAdapter(IWeatherDataProvider):
    """Busca a resposta bruta no provider e a converte para o modelo de domínio"""

    def __init__(self, provider: OpenWeatherMapProvider):
        self.provider = provider

    @property
    def provider_name(self) -> str:
        return self.provider.provider_name

    async def get_by_coordinates(self, latitude: float, longitude: float) -> WeatherSnapshot:
        response = await self.provider.get_weather_data_with_coordinates(lat=latitude, lon=longitude)
        return OpenWeatherMapDataMapper.map_response_to_snapshot(response)

    async def get_by_place(self, identifier: str) -> WeatherSnapshot:
        response = await self.provider.get_weather_data_for_city_code(identifier)
        return OpenWeatherMapDataMapper.map_response_to_snapshot(response)

"""
Weather Provider Factory - criação centralizada do provider configurado
"""
from typing import Optional

from application.ports.output.weather_provider_port import IWeatherDataProvider
from infrastructure.adapters.output.providers.mock import MockWeatherDataProvider
from infrastructure.adapters.output.providers.openweathermap import (
    OpenWeatherMapProvider,
    OpenWeatherMapProviderAdapter,
)
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

OPENWEATHERMAP = "openweathermap"
MOCK = "mock"


class WeatherProviderFactory:
    """
    Factory simples para o provider de clima.
    Escolhe a implementação na construção (settings.WEATHER_PROVIDER) e
    mantém lazy-loading com reuso da instância.
    """

    def __init__(self, provider_name: Optional[str] = None):
        self.provider_name = (provider_name or settings.WEATHER_PROVIDER).lower()
        if self.provider_name not in (OPENWEATHERMAP, MOCK):
            raise ValueError(f"Unknown weather provider: {self.provider_name}")
        self._provider: Optional[IWeatherDataProvider] = None

    def get_weather_provider(self) -> IWeatherDataProvider:
        """Retorna o provider configurado (criado na primeira chamada)."""
        if self._provider is None:
            self._provider = self._create()
            logger.info("Weather provider created", provider=self.provider_name)
        return self._provider

    def _create(self) -> IWeatherDataProvider:
        if self.provider_name == MOCK:
            return MockWeatherDataProvider(delay=settings.MOCK_PROVIDER_DELAY)
        return OpenWeatherMapProviderAdapter(OpenWeatherMapProvider())


# Factory singleton global
_factory_instance: Optional[WeatherProviderFactory] = None


def get_weather_provider_factory(provider_name: Optional[str] = None) -> WeatherProviderFactory:
    """
    Retorna singleton da factory
    (provider_name usado apenas na primeira criação)
    """
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherProviderFactory(provider_name=provider_name)

    return _factory_instance

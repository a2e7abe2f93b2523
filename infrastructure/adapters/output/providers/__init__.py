"""Infrastructure Providers - Implementações de provedores climáticos"""

from infrastructure.adapters.output.providers.openweathermap import (
    OpenWeatherMapProvider,
    OpenWeatherMapProviderAdapter,
)
from infrastructure.adapters.output.providers.mock import MockWeatherDataProvider
from infrastructure.adapters.output.providers.weather_provider_factory import (
    WeatherProviderFactory,
    get_weather_provider_factory,
)

__all__ = [
    'OpenWeatherMapProvider',
    'OpenWeatherMapProviderAdapter',
    'MockWeatherDataProvider',
    'WeatherProviderFactory',
    'get_weather_provider_factory',
]

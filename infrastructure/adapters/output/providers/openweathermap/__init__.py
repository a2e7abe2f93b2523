"""OpenWeatherMap Provider Package"""

from infrastructure.adapters.output.providers.openweathermap.openweathermap_provider import OpenWeatherMapProvider
from infrastructure.adapters.output.providers.openweathermap.openweathermap_provider_adapter import (
    OpenWeatherMapProviderAdapter
)

__all__ = ['OpenWeatherMapProvider', 'OpenWeatherMapProviderAdapter']

"""Mock Provider Package"""
from infrastructure.adapters.output.providers.mock.mock_weather_data_provider import MockWeatherDataProvider

__all__ = ['MockWeatherDataProvider']

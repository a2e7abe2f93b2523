"""Application Use Cases - validação de entrada antes do WeatherService"""
from .get_city_weather import GetCityWeatherUseCase
from .get_weather_by_coordinates import GetWeatherByCoordinatesUseCase

__all__ = [
    'GetCityWeatherUseCase',
    'GetWeatherByCoordinatesUseCase'
]

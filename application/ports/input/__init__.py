"""Input Ports - contratos dos casos de uso"""
from .get_city_weather_port import IGetCityWeatherUseCase
from .get_weather_by_coordinates_port import IGetWeatherByCoordinatesUseCase

__all__ = ['IGetCityWeatherUseCase', 'IGetWeatherByCoordinatesUseCase']

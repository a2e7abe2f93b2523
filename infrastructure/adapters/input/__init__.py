"""Input adapters - pontos de entrada consumidos pela UI"""
from .city_weather_view_state import CityWeatherViewState, CityWeatherViewAction

__all__ = ['CityWeatherViewState', 'CityWeatherViewAction']

"""Application services"""
from .weather_service import WeatherService
from .last_selection_storage import LastSelectionStorage

__all__ = ['WeatherService', 'LastSelectionStorage']

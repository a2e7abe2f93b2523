"""Entidades do domínio"""
from domain.entities.weather_snapshot import (
    WeatherSnapshot,
    Temperature,
    WeatherCondition,
    WindInfo,
)
from domain.entities.last_selection import (
    LastSelection,
    CurrentLocation,
    City,
    encode_last_selection,
    decode_last_selection,
)

__all__ = [
    'WeatherSnapshot',
    'Temperature',
    'WeatherCondition',
    'WindInfo',
    'LastSelection',
    'CurrentLocation',
    'City',
    'encode_last_selection',
    'decode_last_selection',
]

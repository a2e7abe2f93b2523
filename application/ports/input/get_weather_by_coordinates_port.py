"""
Input Port: Interface para buscar dados climáticos por coordenadas
"""
from abc import ABC, abstractmethod

from domain.entities.weather_snapshot import WeatherSnapshot


class IGetWeatherByCoordinatesUseCase(ABC):
    """Interface para caso de uso de buscar dados climáticos por coordenadas"""

    @abstractmethod
    async def execute(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """
        Busca dados climáticos para coordenadas

        Raises:
            InvalidInputError: Se latitude/longitude estiverem fora dos limites
        """
        pass

"""
Input Port: Interface para buscar dados climáticos de uma cidade
"""
from abc import ABC, abstractmethod

from domain.entities.weather_snapshot import WeatherSnapshot


class IGetCityWeatherUseCase(ABC):
    """Interface para caso de uso de buscar dados climáticos de uma cidade"""

    @abstractmethod
    async def execute(self, city_code: str) -> WeatherSnapshot:
        """
        Busca dados climáticos de uma cidade

        Args:
            city_code: Nome, código ou identificador da cidade

        Returns:
            WeatherSnapshot

        Raises:
            InvalidInputError: Se o identificador estiver vazio
        """
        pass

"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod

from domain.entities.weather_snapshot import WeatherSnapshot


class IWeatherDataProvider(ABC):
    """
    Interface para provedores de dados meteorológicos.
    Implementações: adapter OpenWeatherMap (HTTP) e provider mock (testes/preview).
    """

    @abstractmethod
    async def get_by_coordinates(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """
        Busca tempo atual para coordenadas geográficas

        Args:
            latitude: Latitude
            longitude: Longitude

        Returns:
            WeatherSnapshot

        Raises:
            ProviderException: Se o provider falhar
        """
        pass

    @abstractmethod
    async def get_by_place(self, identifier: str) -> WeatherSnapshot:
        """
        Busca tempo atual por nome/código de cidade

        Args:
            identifier: Nome, código ou identificador livre da cidade

        Returns:
            WeatherSnapshot

        Raises:
            ProviderException: Se o provider falhar
        """
        pass

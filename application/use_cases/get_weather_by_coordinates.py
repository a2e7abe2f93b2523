"""
Use Case: Get Weather By Coordinates
"""
from ddtrace import tracer

from application.ports.input.get_weather_by_coordinates_port import IGetWeatherByCoordinatesUseCase
from application.services.weather_service import WeatherService
from domain.entities.weather_snapshot import WeatherSnapshot
from shared.config.logger_config import get_logger
from shared.utils.validators import CoordinatesValidator

logger = get_logger(child=True)


class GetWeatherByCoordinatesUseCase(IGetWeatherByCoordinatesUseCase):
    """Use case: weather for a latitude/longitude pair"""

    def __init__(self, weather_service: WeatherService):
        self.weather_service = weather_service

    @tracer.wrap(resource="use_case.get_weather_by_coordinates")
    async def execute(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """
        Execute use case

        Args:
            latitude: Latitude in [-90, 90]
            longitude: Longitude in [-180, 180]

        Returns:
            WeatherSnapshot for the coordinates

        Raises:
            InvalidInputError: If latitude or longitude is out of range
        """
        CoordinatesValidator.validate(latitude, longitude)

        logger.debug("Fetching weather by coordinates", latitude=latitude, longitude=longitude)
        return await self.weather_service.get_by_coordinates(latitude, longitude)

"""
Use Case: Get City Weather
Busca o tempo atual por nome/código de cidade
"""
from ddtrace import tracer

from application.ports.input.get_city_weather_port import IGetCityWeatherUseCase
from application.services.weather_service import WeatherService
from domain.entities.weather_snapshot import WeatherSnapshot
from shared.config.logger_config import get_logger
from shared.utils.validators import CityCodeValidator

logger = get_logger(child=True)


class GetCityWeatherUseCase(IGetCityWeatherUseCase):
    """Use case: weather for a city code or free-text place name"""

    def __init__(self, weather_service: WeatherService):
        self.weather_service = weather_service

    @tracer.wrap(resource="use_case.get_city_weather")
    async def execute(self, city_code: str) -> WeatherSnapshot:
        """
        Execute use case

        Args:
            city_code: City code, name or identifier

        Returns:
            WeatherSnapshot for the place

        Raises:
            InvalidInputError: If city_code is empty or whitespace only
        """
        # Trimmed value only gates emptiness; the original string goes downstream
        CityCodeValidator.validate(city_code)

        logger.debug("Fetching weather by city code", city_code=city_code)
        return await self.weather_service.get_by_place(city_code)

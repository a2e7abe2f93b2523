"""
OpenWeatherMap Data Mapper - Transforma a resposta da API em WeatherSnapshot
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from datetime import datetime, timezone

from domain.entities.weather_snapshot import (
    Temperature,
    WeatherCondition,
    WeatherSnapshot,
    WindInfo,
)
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.providers.openweathermap.models import OpenWeatherMapAPIResponse


class OpenWeatherMapDataMapper:
    """
    Mapper para transformar respostas da API OpenWeatherMap em entities de domínio

    Responsabilidade: Traduzir formato OpenWeatherMap → WeatherSnapshot
    Função pura e total para respostas bem formadas.
    """

    @staticmethod
    def map_response_to_snapshot(response: OpenWeatherMapAPIResponse) -> WeatherSnapshot:
        """
        Mapeia resposta /weather para WeatherSnapshot

        - Usa a primeira condição da lista (sentinela "Unknown" se vazia)
        - Campos 1:1 (temperaturas, vento, umidade, visibilidade)
        - dt (epoch segundos) → datetime UTC
        - timezone (offset em segundos) repassado sem alteração
        """
        return WeatherSnapshot(
            place_name=response.name,
            coordinates=Coordinates(
                latitude=response.coord.lat,
                longitude=response.coord.lon
            ),
            temperature=Temperature(
                current=response.main.temp,
                feels_like=response.main.feels_like,
                minimum=response.main.temp_min,
                maximum=response.main.temp_max
            ),
            condition=OpenWeatherMapDataMapper._map_condition(response),
            wind=WindInfo(
                speed=response.wind.speed,
                direction=response.wind.deg
            ),
            humidity=response.main.humidity,
            visibility=response.visibility,
            observed_at=datetime.fromtimestamp(response.dt, tz=timezone.utc),
            utc_offset_seconds=response.timezone
        )

    @staticmethod
    def _map_condition(response: OpenWeatherMapAPIResponse) -> WeatherCondition:
        if not response.weather:
            return WeatherCondition.unknown()

        first = response.weather[0]
        return WeatherCondition(
            code=first.id,
            category=first.main,
            description=first.description,
            icon=first.icon
        )

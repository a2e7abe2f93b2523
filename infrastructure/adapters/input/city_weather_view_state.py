"""
City Weather View State - estado de apresentação consumido pela UI

Adapter de entrada: a UI chama load_*/refresh e renderiza os campos
formatados. É a única camada que captura erros: qualquer falha vira estado
de erro observável com os campos de exibição vazios.
"""
import asyncio
from datetime import datetime
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from application.ports.input.get_city_weather_port import IGetCityWeatherUseCase
from application.ports.input.get_weather_by_coordinates_port import IGetWeatherByCoordinatesUseCase
from application.ports.output.location_provider_port import ILocationProvider
from domain.entities.weather_snapshot import WeatherSnapshot
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger
from shared.utils.weather_formatters import (
    format_date_label,
    format_humidity,
    format_summary,
    format_temperature,
    format_utc_offset,
    format_visibility,
    format_wind,
    icon_name_for,
)

logger = get_logger(child=True)


class CityWeatherViewAction(Enum):
    """Ações disparadas pela UI"""
    REFRESH = "refresh"


class CityWeatherViewState:
    """
    Estado mutável da tela de tempo de uma cidade/localização

    Concorrência:
    - No máximo um fetch em andamento por instância (flag is_loading)
    - Pedidos durante um fetch são descartados, não enfileirados
    - Sem cancelamento
    """

    def __init__(
        self,
        get_city_weather_use_case: IGetCityWeatherUseCase,
        get_weather_by_coordinates_use_case: IGetWeatherByCoordinatesUseCase,
        place_name: Optional[str] = None,
        location_provider: Optional[ILocationProvider] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Args:
            get_city_weather_use_case: Caso de uso por nome/código de cidade
            get_weather_by_coordinates_use_case: Caso de uso por coordenadas
            place_name: Nome exibido antes da primeira carga
            location_provider: Fonte da localização atual (load_current_location)
            clock: Relógio de parede usado no rótulo de data
        """
        self.get_city_weather_use_case = get_city_weather_use_case
        self.get_weather_by_coordinates_use_case = get_weather_by_coordinates_use_case
        self.location_provider = location_provider
        self.clock = clock

        self.is_loading: bool = False
        self.error: Optional[Exception] = None
        self._task: Optional[asyncio.Task] = None

        self._reset_properties()
        self.place_name = place_name or ""
        self.date_label = format_date_label(self.clock())

        # Parâmetros da última carga (para refresh)
        self._last_city_code: Optional[str] = None
        self._last_coordinates: Optional[Tuple[float, float]] = None

    # Public API

    def load_by_place(self, identifier: str) -> Optional[asyncio.Task]:
        """
        Inicia carga por nome/código de cidade

        Returns:
            Task do fetch, ou None se já havia carga em andamento
        """
        if self.is_loading:
            return None

        self._last_city_code = identifier
        self._last_coordinates = None
        return self._start(lambda: self.get_city_weather_use_case.execute(identifier))

    def load_by_coordinates(self, latitude: float, longitude: float) -> Optional[asyncio.Task]:
        """
        Inicia carga por coordenadas

        Returns:
            Task do fetch, ou None se já havia carga em andamento
        """
        if self.is_loading:
            return None

        self._last_city_code = None
        self._last_coordinates = (latitude, longitude)
        return self._start(
            lambda: self.get_weather_by_coordinates_use_case.execute(latitude, longitude)
        )

    def refresh(self) -> Optional[asyncio.Task]:
        """Repete a última carga; no-op se ocupado ou se nada foi carregado"""
        if self.is_loading:
            return None

        if self._last_city_code is not None:
            return self.load_by_place(self._last_city_code)
        if self._last_coordinates is not None:
            return self.load_by_coordinates(*self._last_coordinates)
        return None

    def perform(self, action: CityWeatherViewAction) -> Optional[asyncio.Task]:
        if action is CityWeatherViewAction.REFRESH:
            return self.refresh()
        raise ValueError(f"Unsupported action: {action}")

    async def load_current_location(self) -> None:
        """
        Obtém a localização do dispositivo e carrega o tempo para ela.
        Falha de localização é tratada como falha de carga.
        """
        if self.is_loading:
            return
        if self.location_provider is None:
            raise ValueError("No location provider configured")

        self.is_loading = True
        self.error = None
        try:
            coordinates = await self.location_provider.request_current_location()
        except Exception as e:
            self._handle_failure(e)
            self.is_loading = False
            return

        self.is_loading = False
        task = self.load_by_coordinates(coordinates.latitude, coordinates.longitude)
        if task is not None:
            await task

    def display_fields(self) -> Dict[str, Any]:
        """Campos de exibição atuais"""
        return {
            'place_name': self.place_name,
            'date_label': self.date_label,
            'icon_name': self.icon_name,
            'temperature': self.temperature,
            'temperature_min': self.temperature_min,
            'temperature_max': self.temperature_max,
            'weather_summary': self.weather_summary,
            'wind': self.wind,
            'humidity': self.humidity,
            'feels_like': self.feels_like,
            'coordinates': self.coordinates,
            'visibility': self.visibility,
            'timezone': self.timezone,
        }

    # Internals

    def _start(self, fetch: Callable[[], Awaitable[WeatherSnapshot]]) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        # Marca antes de agendar: uma segunda chamada no mesmo tick já é descartada
        self.is_loading = True
        self.error = None
        # Referência forte: o loop guarda tasks apenas por weakref
        self._task = loop.create_task(self._run(fetch))
        return self._task

    async def _run(self, fetch: Callable[[], Awaitable[WeatherSnapshot]]) -> None:
        try:
            snapshot = await fetch()
        except Exception as e:
            self._handle_failure(e)
        else:
            self._update_properties(snapshot)
            logger.info("Weather loaded", place=snapshot.place_name)
        finally:
            self.is_loading = False
            self._task = None

    def _handle_failure(self, error: Exception) -> None:
        logger.warning(
            "Weather load failed",
            error=str(error),
            error_type=type(error).__name__
        )
        self.error = error
        self._reset_properties()

    def _update_properties(self, snapshot: WeatherSnapshot) -> None:
        self.place_name = snapshot.place_name
        # Horário atual, não o da observação
        self.date_label = format_date_label(self.clock())
        self.icon_name = icon_name_for(snapshot.condition.icon)
        self.temperature = format_temperature(snapshot.temperature.current)
        self.temperature_min = format_temperature(snapshot.temperature.minimum)
        self.temperature_max = format_temperature(snapshot.temperature.maximum)
        self.weather_summary = format_summary(snapshot.condition.description)
        self.wind = format_wind(snapshot.wind.speed, snapshot.wind.direction)
        self.humidity = format_humidity(snapshot.humidity)
        self.feels_like = format_temperature(snapshot.temperature.feels_like)
        self.coordinates = snapshot.coordinates
        self.visibility = format_visibility(snapshot.visibility)
        self.timezone = format_utc_offset(snapshot.utc_offset_seconds)
        self.error = None

    def _reset_properties(self) -> None:
        self.place_name: str = ""
        self.date_label: str = ""
        self.icon_name: str = ""
        self.temperature: str = ""
        self.temperature_min: str = ""
        self.temperature_max: str = ""
        self.weather_summary: str = ""
        self.wind: str = ""
        self.humidity: str = ""
        self.feels_like: str = ""
        self.coordinates: Optional[Coordinates] = None
        self.visibility: str = ""
        self.timezone: str = ""

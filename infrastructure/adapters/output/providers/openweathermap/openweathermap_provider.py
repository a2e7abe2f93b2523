"""OpenWeatherMap Provider - cliente HTTP da API current weather (/data/2.5/weather)"""

import json
from typing import Dict, Optional

from ddtrace import tracer

from domain.constants import API
from domain.exceptions import DecodingError, TransportError
from infrastructure.adapters.output.providers.openweathermap.models import OpenWeatherMapAPIResponse
from shared.config import settings
from shared.config.aiohttp_session_manager import AiohttpSessionManager, get_aiohttp_session_manager
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenWeatherMapProvider:
    """
    Provider para a API OpenWeatherMap (tempo atual)

    Características:
    - Uma chamada GET por consulta (sem retry, sem cache)
    - Unidades fixas em 'metric'
    - Status != 200 -> TransportError; corpo fora do schema -> DecodingError
    - 100% async com aiohttp
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        path: Optional[str] = None,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        """
        Inicializa provider

        Args:
            api_key: OpenWeatherMap API key (settings se None)
            base_url: URL base (ex: https://api.openweathermap.org)
            path: Caminho do endpoint (ex: /data/2.5/weather)
            session_manager: Gerenciador de sessão aiohttp (singleton se None)

        Raises:
            ValueError: Se API key não configurada
        """
        self.api_key = api_key or settings.OPENWEATHERMAP_API_KEY
        if not self.api_key:
            raise ValueError("OPENWEATHERMAP_API_KEY is not configured")

        self.base_url = (base_url or settings.OPENWEATHERMAP_BASE_URL).rstrip('/')
        self.path = path or settings.OPENWEATHERMAP_PATH
        self.session_manager = session_manager or get_aiohttp_session_manager(
            limit=settings.HTTP_CONNECTION_LIMIT,
            limit_per_host=settings.HTTP_CONNECTION_LIMIT_PER_HOST
        )

    @property
    def provider_name(self) -> str:
        return "OpenWeatherMap"

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.path}"

    @tracer.wrap(resource="openweathermap.get_weather_by_coordinates")
    async def get_weather_data_with_coordinates(
        self,
        lat: float,
        lon: float
    ) -> OpenWeatherMapAPIResponse:
        """
        Busca tempo atual por coordenadas

        Args:
            lat: Latitude
            lon: Longitude

        Returns:
            Resposta bruta decodificada
        """
        params = {
            'lat': f"{lat:f}",
            'lon': f"{lon:f}",
            'units': API.UNITS_METRIC,
            'appid': self.api_key
        }
        return await self._fetch_weather_data(params)

    @tracer.wrap(resource="openweathermap.get_weather_by_city_code")
    async def get_weather_data_for_city_code(self, code: str) -> OpenWeatherMapAPIResponse:
        """
        Busca tempo atual por nome/código de cidade

        Args:
            code: Texto livre enviado no parâmetro 'q'

        Returns:
            Resposta bruta decodificada
        """
        params = {
            'q': code,
            'units': API.UNITS_METRIC,
            'appid': self.api_key
        }
        return await self._fetch_weather_data(params)

    async def _fetch_weather_data(self, params: Dict[str, str]) -> OpenWeatherMapAPIResponse:
        """
        Executa a requisição e decodifica a resposta

        Raises:
            TransportError: Status HTTP diferente de 200
            DecodingError: Corpo não é JSON ou não segue o schema
        """
        session = await self.session_manager.get_session()

        async with session.get(self.url, params=params) as response:
            if response.status != 200:
                logger.warning(
                    "OpenWeatherMap returned non-200 status",
                    status=response.status
                )
                raise TransportError(
                    "Invalid response from server",
                    details={"status": response.status}
                )

            try:
                payload = await response.json(content_type=None)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise DecodingError(
                    "Failed to decode weather data",
                    details={"reason": str(e)}
                ) from e

        return OpenWeatherMapAPIResponse.from_dict(payload)

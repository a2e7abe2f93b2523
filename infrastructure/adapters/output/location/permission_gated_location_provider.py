"""
Permission-Gated Location Provider

Pede permissão quando necessário, espera a resposta da plataforma por um
tempo limitado (asyncio.Event sinalizado pelo callback de autorização) e
só então solicita a posição.
"""
import asyncio
from typing import Optional

from application.ports.output.location_provider_port import (
    AuthorizationStatus,
    ILocationPlatform,
    ILocationProvider,
)
from domain.exceptions import LocationPermissionError, LocationUnavailableError
from domain.value_objects.coordinates import Coordinates
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

AUTHORIZED = (
    AuthorizationStatus.AUTHORIZED_WHEN_IN_USE,
    AuthorizationStatus.AUTHORIZED_ALWAYS,
)
REJECTED = (
    AuthorizationStatus.DENIED,
    AuthorizationStatus.RESTRICTED,
)

PERMISSION_DENIED_MESSAGE = "Location permission denied. Please enable location services in Settings."


class PermissionGatedLocationProvider(ILocationProvider):
    """ILocationProvider sobre a API de localização da plataforma"""

    def __init__(
        self,
        platform: ILocationPlatform,
        permission_timeout: Optional[float] = None
    ):
        """
        Args:
            platform: API de localização da plataforma
            permission_timeout: Espera máxima pela resposta ao pedido de permissão (segundos)
        """
        self.platform = platform
        self.permission_timeout = (
            settings.LOCATION_PERMISSION_TIMEOUT if permission_timeout is None else permission_timeout
        )
        self._authorization_changed = asyncio.Event()

    def notify_authorization_changed(self) -> None:
        """Callback da plataforma quando o status de autorização muda"""
        self._authorization_changed.set()

    async def request_current_location(self) -> Coordinates:
        """
        Returns:
            Coordenadas atuais do dispositivo

        Raises:
            LocationPermissionError: Permissão negada, restrita ou não concedida a tempo
            LocationUnavailableError: Plataforma não retornou posição
        """
        status = self.platform.authorization_status

        if status is AuthorizationStatus.NOT_DETERMINED:
            status = await self._request_authorization()
            if status not in AUTHORIZED:
                raise LocationPermissionError(
                    PERMISSION_DENIED_MESSAGE,
                    details={"status": status.value}
                )
        elif status in REJECTED:
            raise LocationPermissionError(PERMISSION_DENIED_MESSAGE, details={"status": status.value})
        elif status not in AUTHORIZED:
            raise LocationPermissionError(
                "Unknown location authorization status.",
                details={"status": str(status)}
            )

        coordinates = await self.platform.locate()
        if coordinates is None:
            raise LocationUnavailableError("Unable to determine your current location.")

        return coordinates

    async def _request_authorization(self) -> AuthorizationStatus:
        self._authorization_changed.clear()
        self.platform.request_authorization()

        try:
            await asyncio.wait_for(self._authorization_changed.wait(), timeout=self.permission_timeout)
        except asyncio.TimeoutError:
            logger.info("No authorization response before timeout", timeout=self.permission_timeout)

        return self.platform.authorization_status

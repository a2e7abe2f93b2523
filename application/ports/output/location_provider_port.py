"""
Output Ports: localização do dispositivo

ILocationProvider é o que o core consome (fonte assíncrona de coordenadas).
ILocationPlatform é a fronteira com a API de localização da plataforma.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from domain.value_objects.coordinates import Coordinates


class AuthorizationStatus(Enum):
    """Estado de permissão de localização reportado pela plataforma"""
    NOT_DETERMINED = "not_determined"
    DENIED = "denied"
    RESTRICTED = "restricted"
    AUTHORIZED_WHEN_IN_USE = "authorized_when_in_use"
    AUTHORIZED_ALWAYS = "authorized_always"


class ILocationProvider(ABC):
    """Fonte assíncrona da posição atual do dispositivo"""

    @abstractmethod
    async def request_current_location(self) -> Coordinates:
        """
        Raises:
            LocationPermissionError: Permissão negada ou não concedida
            LocationUnavailableError: Posição não pôde ser determinada
        """
        pass


class ILocationPlatform(ABC):
    """API de localização da plataforma"""

    @property
    @abstractmethod
    def authorization_status(self) -> AuthorizationStatus:
        pass

    @abstractmethod
    def request_authorization(self) -> None:
        """Dispara o pedido de permissão (resposta chega de forma assíncrona)"""
        pass

    @abstractmethod
    async def locate(self) -> Optional[Coordinates]:
        """Retorna a posição atual ou None se nenhuma leitura estiver disponível"""
        pass

"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass
from typing import Tuple

from domain.exceptions import InvalidInputError


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__ (limites inclusivos)
    - Type-safe (não são floats soltos)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (-90 <= self.latitude <= 90):
            raise InvalidInputError(
                "Latitude must be between -90 and 90",
                details={"latitude": self.latitude}
            )
        if not (-180 <= self.longitude <= 180):
            raise InvalidInputError(
                "Longitude must be between -180 and 180",
                details={"longitude": self.longitude}
            )

    def to_tuple(self) -> Tuple[float, float]:
        """
        Retorna coordenadas como tupla (lat, lon)

        Returns:
            Tupla (latitude, longitude)
        """
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        """String representation amigável"""
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"

    @classmethod
    def from_tuple(cls, coords: Tuple[float, float]) -> 'Coordinates':
        """
        Factory method para criar a partir de tupla

        Args:
            coords: Tupla (latitude, longitude)

        Returns:
            Instância de Coordinates
        """
        return cls(latitude=coords[0], longitude=coords[1])

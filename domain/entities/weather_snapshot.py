"""
WeatherSnapshot Entity - uma observação meteorológica, independente do provider
"""
from dataclasses import dataclass, replace
from datetime import datetime

from domain.constants import Condition
from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class Temperature:
    """Temperaturas em °C"""
    current: float
    feels_like: float
    minimum: float
    maximum: float


@dataclass(frozen=True)
class WeatherCondition:
    """Condição climática reportada pelo provider"""
    code: int
    category: str  # ex: "Clear", "Clouds"
    description: str  # ex: "clear sky"
    icon: str  # token de ícone do provider (ex: "01d")

    @classmethod
    def unknown(cls) -> 'WeatherCondition':
        """Condição sentinela usada quando o provider não envia nenhuma"""
        return cls(
            code=Condition.UNKNOWN_CODE,
            category=Condition.UNKNOWN_CATEGORY,
            description=Condition.UNKNOWN_DESCRIPTION,
            icon=Condition.UNKNOWN_ICON
        )


@dataclass(frozen=True)
class WindInfo:
    """Vento"""
    speed: float  # m/s
    direction: int  # graus


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Entidade imutável com os dados de uma consulta de tempo atual.

    Criada pelo adapter do provider a partir da resposta bruta e substituída
    inteira a cada nova busca. Não é persistida.
    """
    place_name: str
    coordinates: Coordinates
    temperature: Temperature
    condition: WeatherCondition
    wind: WindInfo
    humidity: int  # %
    visibility: int  # metros
    observed_at: datetime  # horário de captura informado pelo provider (UTC)
    utc_offset_seconds: int

    def with_place_name(self, place_name: str) -> 'WeatherSnapshot':
        return replace(self, place_name=place_name)

    def with_coordinates(self, coordinates: Coordinates) -> 'WeatherSnapshot':
        return replace(self, coordinates=coordinates)

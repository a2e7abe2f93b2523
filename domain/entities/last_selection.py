"""
LastSelection - última escolha de localização do usuário

União discriminada: CurrentLocation | City(name).
Serializada como JSON com discriminante estável:
    {"type": "currentLocation"}
    {"type": "city", "name": "London"}
"""
import json
from dataclasses import dataclass
from typing import Union


CURRENT_LOCATION_TYPE = "currentLocation"
CITY_TYPE = "city"


@dataclass(frozen=True)
class CurrentLocation:
    """Usuário escolheu a localização atual do dispositivo"""

    def to_dict(self) -> dict:
        return {"type": CURRENT_LOCATION_TYPE}


@dataclass(frozen=True)
class City:
    """Usuário escolheu uma cidade pelo nome"""
    name: str

    def to_dict(self) -> dict:
        return {"type": CITY_TYPE, "name": self.name}


LastSelection = Union[CurrentLocation, City]


def encode_last_selection(selection: LastSelection) -> str:
    """
    Serializa a seleção para armazenamento

    Args:
        selection: CurrentLocation ou City

    Returns:
        String JSON

    Raises:
        TypeError: Se o valor não for uma LastSelection
    """
    if not isinstance(selection, (CurrentLocation, City)):
        raise TypeError(f"Unsupported selection type: {type(selection).__name__}")
    return json.dumps(selection.to_dict())


def decode_last_selection(raw: str) -> LastSelection:
    """
    Desserializa uma seleção armazenada

    Args:
        raw: String JSON produzida por encode_last_selection

    Returns:
        CurrentLocation ou City

    Raises:
        ValueError: JSON inválido, discriminante desconhecido ou payload incompleto
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("Last selection must be a JSON object")

    kind = data.get("type")
    if kind == CURRENT_LOCATION_TYPE:
        return CurrentLocation()
    if kind == CITY_TYPE:
        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError("City selection requires a string 'name'")
        return City(name=name)

    raise ValueError(f"Unknown last selection type: {kind!r}")

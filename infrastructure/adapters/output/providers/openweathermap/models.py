"""
OpenWeatherMap API Response - schema da resposta /data/2.5/weather
LOCALIZAÇÃO: infrastructure (conhece o formato externo)

O parsing é estrito: qualquer chave ausente ou tipo inesperado descarta a
resposta inteira com DecodingError.
"""
from dataclasses import dataclass
from typing import Any, Dict, List

from domain.exceptions import DecodingError


@dataclass(frozen=True)
class OWMCoord:
    lat: float
    lon: float


@dataclass(frozen=True)
class OWMMain:
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int


@dataclass(frozen=True)
class OWMWeather:
    id: int
    main: str
    description: str
    icon: str


@dataclass(frozen=True)
class OWMWind:
    speed: float
    deg: int


@dataclass(frozen=True)
class OpenWeatherMapAPIResponse:
    coord: OWMCoord
    main: OWMMain
    weather: List[OWMWeather]
    wind: OWMWind
    visibility: int
    dt: int
    timezone: int
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> 'OpenWeatherMapAPIResponse':
        """
        Constrói a resposta a partir do JSON decodificado

        Raises:
            DecodingError: Se o JSON não corresponder ao schema
        """
        root = _as_object(data, "$")
        coord = _as_object(_field(root, "coord", "$"), "coord")
        main = _as_object(_field(root, "main", "$"), "main")
        wind = _as_object(_field(root, "wind", "$"), "wind")
        weather = _field(root, "weather", "$")
        if not isinstance(weather, list):
            raise DecodingError(
                "Failed to decode weather data",
                details={"field": "weather", "reason": "expected array"}
            )

        return cls(
            coord=OWMCoord(
                lat=_number(coord, "lat", "coord"),
                lon=_number(coord, "lon", "coord")
            ),
            main=OWMMain(
                temp=_number(main, "temp", "main"),
                feels_like=_number(main, "feels_like", "main"),
                temp_min=_number(main, "temp_min", "main"),
                temp_max=_number(main, "temp_max", "main"),
                humidity=_integer(main, "humidity", "main")
            ),
            weather=[_parse_weather_item(item, index) for index, item in enumerate(weather)],
            wind=OWMWind(
                speed=_number(wind, "speed", "wind"),
                deg=_integer(wind, "deg", "wind")
            ),
            visibility=_integer(root, "visibility", "$"),
            dt=_integer(root, "dt", "$"),
            timezone=_integer(root, "timezone", "$"),
            name=_string(root, "name", "$")
        )


def _parse_weather_item(item: Any, index: int) -> OWMWeather:
    path = f"weather[{index}]"
    obj = _as_object(item, path)
    return OWMWeather(
        id=_integer(obj, "id", path),
        main=_string(obj, "main", path),
        description=_string(obj, "description", path),
        icon=_string(obj, "icon", path)
    )


def _fail(path: str, key: str, reason: str) -> DecodingError:
    return DecodingError(
        "Failed to decode weather data",
        details={"field": f"{path}.{key}" if key else path, "reason": reason}
    )


def _as_object(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise _fail(path, "", "expected object")
    return value


def _field(obj: Dict[str, Any], key: str, path: str) -> Any:
    if key not in obj:
        raise _fail(path, key, "missing")
    return obj[key]


def _number(obj: Dict[str, Any], key: str, path: str) -> float:
    value = _field(obj, key, path)
    # bool é subclasse de int
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _fail(path, key, "expected number")
    return float(value)


def _integer(obj: Dict[str, Any], key: str, path: str) -> int:
    value = _field(obj, key, path)
    if isinstance(value, bool) or not isinstance(value, int):
        raise _fail(path, key, "expected integer")
    return value


def _string(obj: Dict[str, Any], key: str, path: str) -> str:
    value = _field(obj, key, path)
    if not isinstance(value, str):
        raise _fail(path, key, "expected string")
    return value

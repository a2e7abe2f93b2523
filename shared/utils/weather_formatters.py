"""
Weather Formatters - converte valores do domínio em strings de exibição
"""
from datetime import datetime
from enum import Enum

from domain.constants import Display


class WeatherIcon(Enum):
    """Categoria semântica do ícone exibido"""
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly-cloudy"
    CLOUDY = "cloudy"
    RAIN = "rain"
    RAIN_WITH_SUN = "rain-with-sun"
    THUNDER = "thunder"
    SNOW = "snow"
    FOG = "fog"


# Códigos de ícone OpenWeatherMap (dia/noite) → categoria
ICON_CODE_MAP = {
    "01d": WeatherIcon.CLEAR, "01n": WeatherIcon.CLEAR,
    "02d": WeatherIcon.PARTLY_CLOUDY, "02n": WeatherIcon.PARTLY_CLOUDY,
    "03d": WeatherIcon.CLOUDY, "03n": WeatherIcon.CLOUDY,
    "04d": WeatherIcon.CLOUDY, "04n": WeatherIcon.CLOUDY,
    "09d": WeatherIcon.RAIN, "09n": WeatherIcon.RAIN,
    "10d": WeatherIcon.RAIN_WITH_SUN, "10n": WeatherIcon.RAIN_WITH_SUN,
    "11d": WeatherIcon.THUNDER, "11n": WeatherIcon.THUNDER,
    "13d": WeatherIcon.SNOW, "13n": WeatherIcon.SNOW,
    "50d": WeatherIcon.FOG, "50n": WeatherIcon.FOG,
}


def format_date_label(moment: datetime) -> str:
    """Data média + hora curta (ex: 'Oct 18, 2026, 03:45 PM')"""
    return moment.strftime(Display.DATE_LABEL_FORMAT)


def format_temperature(value: float) -> str:
    """Arredonda para grau inteiro, sem casas decimais"""
    return f"{value:.0f}"


def direction_to_compass(degrees: int) -> str:
    """
    Converte graus em rosa dos ventos de 16 pontos

    Equivale a round(degrees / 22.5) mod 16 com arredondamento half-up.
    """
    index = int((degrees + Display.COMPASS_SECTOR_DEGREES / 2) / Display.COMPASS_SECTOR_DEGREES) % 16
    return Display.COMPASS_POINTS[index]


def format_wind(speed: float, direction: int) -> str:
    """m/s → km/h arredondado + direção (ex: '18 km/h N')"""
    return f"{speed * Display.MS_TO_KMH:.0f} km/h {direction_to_compass(direction)}"


def format_visibility(visibility: int) -> str:
    """Metros abaixo de 1 km ('500 m'), km com uma casa a partir disso ('10.0 km')"""
    if visibility >= Display.VISIBILITY_KM_THRESHOLD:
        return f"{visibility / 1000.0:.1f} km"
    return f"{visibility} m"


def format_utc_offset(offset_seconds: int) -> str:
    """
    Offset em segundos → 'UTC+H' ou 'UTC+H:MM'

    Examples:
        >>> format_utc_offset(-28800)
        'UTC-8'
        >>> format_utc_offset(-19800)
        'UTC-5:30'
    """
    sign = "-" if offset_seconds < 0 else "+"
    hours, remainder = divmod(abs(offset_seconds), 3600)
    minutes = remainder // 60
    if minutes == 0:
        return f"UTC{sign}{hours}"
    return f"UTC{sign}{hours}:{minutes:02d}"


def icon_name_for(icon_code: str) -> str:
    """Código de ícone do provider → categoria semântica (desconhecido → cloudy)"""
    return ICON_CODE_MAP.get(icon_code, WeatherIcon.CLOUDY).value


def format_summary(description: str) -> str:
    """'clear sky' → 'Clear Sky'"""
    return description.title()


def format_humidity(humidity: int) -> str:
    return f"{humidity}%"

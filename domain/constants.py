"""
Domain Constants - constantes fixas da aplicação
Valores configuráveis por ambiente ficam em shared/config/settings.py
"""


class API:
    """Constantes da API OpenWeatherMap (current weather)"""

    OPENWEATHERMAP_BASE_URL = "https://api.openweathermap.org"
    OPENWEATHERMAP_PATH = "/data/2.5/weather"
    UNITS_METRIC = "metric"

    # Pool HTTP (sem override de timeout: defaults do aiohttp)
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Condition:
    """Condição sentinela quando o provider não retorna nenhuma condição"""

    UNKNOWN_CODE = 0
    UNKNOWN_CATEGORY = "Unknown"
    UNKNOWN_DESCRIPTION = "Unknown"
    UNKNOWN_ICON = "01d"


class Display:
    """Constantes de formatação para a camada de apresentação"""

    COMPASS_POINTS = (
        "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
        "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
    )
    COMPASS_SECTOR_DEGREES = 22.5
    MS_TO_KMH = 3.6
    VISIBILITY_KM_THRESHOLD = 1000  # metros
    DATE_LABEL_FORMAT = "%b %d, %Y, %I:%M %p"


class Storage:
    """Chaves de persistência"""

    LAST_SELECTION_KEY = "lastSelection"

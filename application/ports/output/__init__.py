"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .weather_provider_port import IWeatherDataProvider
from .settings_store_port import ISettingsStore
from .location_provider_port import ILocationProvider, ILocationPlatform, AuthorizationStatus

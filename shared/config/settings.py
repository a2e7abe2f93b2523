"""
Configurações centralizadas da aplicação
"""
import os

from domain.constants import API

# OpenWeatherMap
OPENWEATHERMAP_API_KEY = os.environ.get('OPENWEATHERMAP_API_KEY', '')
OPENWEATHERMAP_BASE_URL = os.environ.get('OPENWEATHERMAP_BASE_URL', API.OPENWEATHERMAP_BASE_URL)
OPENWEATHERMAP_PATH = os.environ.get('OPENWEATHERMAP_PATH', API.OPENWEATHERMAP_PATH)

# Provider ativo: 'openweathermap' ou 'mock'
WEATHER_PROVIDER = os.environ.get('WEATHER_PROVIDER', 'openweathermap').lower()
MOCK_PROVIDER_DELAY = float(os.environ.get('MOCK_PROVIDER_DELAY', '0.5'))  # segundos

# Pool HTTP
HTTP_CONNECTION_LIMIT = int(os.environ.get('HTTP_CONNECTION_LIMIT', str(API.HTTP_CONNECTION_LIMIT)))
HTTP_CONNECTION_LIMIT_PER_HOST = int(
    os.environ.get('HTTP_CONNECTION_LIMIT_PER_HOST', str(API.HTTP_CONNECTION_LIMIT_PER_HOST))
)

# Preferências do usuário
LAST_SELECTION_STORE_PATH = os.environ.get(
    'LAST_SELECTION_STORE_PATH',
    os.path.join(os.path.expanduser('~'), '.astro_weather', 'settings.json')
)

# Localização (espera pela resposta do pedido de permissão)
LOCATION_PERMISSION_TIMEOUT = float(os.environ.get('LOCATION_PERMISSION_TIMEOUT', '1.0'))  # segundos

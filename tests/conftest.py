"""
Configuração global dos testes
Variáveis de ambiente definidas antes de importar ddtrace/powertools
"""
import os

os.environ.setdefault('DD_TRACE_ENABLED', 'false')
os.environ.setdefault('POWERTOOLS_SERVICE_NAME', 'astro-weather-tests')
os.environ.setdefault('POWERTOOLS_LOG_LEVEL', 'WARNING')

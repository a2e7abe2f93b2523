"""
Configuração centralizada de logging para a aplicação
Configura o logger AWS Lambda Powertools com service name da aplicação
"""
import os
from aws_lambda_powertools import Logger


def get_logger(service_name: str = None, child: bool = False) -> Logger:
    """
    Retorna uma instância configurada do Logger

    Args:
        service_name: Nome do serviço (se None, usa POWERTOOLS_SERVICE_NAME/DD_SERVICE do ambiente)
        child: Se True, cria um child logger

    Returns:
        Logger configurado
    """
    if service_name is None:
        service_name = os.environ.get(
            'POWERTOOLS_SERVICE_NAME',
            os.environ.get('DD_SERVICE', 'astro-weather')
        )

    if child:
        return Logger(service=service_name, child=True)

    return Logger(service=service_name)


# Logger principal da aplicação
logger = get_logger()

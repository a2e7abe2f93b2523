"""
Output Port: Interface para armazenamento de preferências chave/valor
"""
from typing import Protocol, Optional


class ISettingsStore(Protocol):
    """Armazenamento simples de preferências do usuário (última escolha vence)"""

    def get(self, key: str) -> Optional[str]:
        """
        Busca valor por chave

        Returns:
            Valor armazenado ou None se ausente
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Sobrescreve o valor da chave"""
        ...

    def remove(self, key: str) -> None:
        """Remove a chave (sem erro se ausente)"""
        ...

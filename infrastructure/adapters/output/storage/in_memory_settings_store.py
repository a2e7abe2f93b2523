"""In-memory settings store (processo único, sem persistência em disco)"""
from typing import Dict, Optional


class InMemorySettingsStore:
    """Implementação de ISettingsStore em dicionário"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

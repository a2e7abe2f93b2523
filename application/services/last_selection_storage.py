"""
Last Selection Storage - persiste a última escolha de localização do usuário
Um único valor por chave; a escrita mais recente vence.
"""
from typing import Optional

from application.ports.output.settings_store_port import ISettingsStore
from domain.constants import Storage
from domain.entities.last_selection import (
    LastSelection,
    decode_last_selection,
    encode_last_selection,
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class LastSelectionStorage:
    """Lê e grava LastSelection num ISettingsStore"""

    def __init__(self, store: ISettingsStore, key: str = Storage.LAST_SELECTION_KEY):
        self.store = store
        self.key = key

    def save_last_selection(self, selection: LastSelection) -> None:
        """Sobrescreve a seleção armazenada"""
        self.store.set(self.key, encode_last_selection(selection))

    def get_last_selection(self) -> Optional[LastSelection]:
        """
        Returns:
            A seleção armazenada, ou None se ausente/ilegível
        """
        raw = self.store.get(self.key)
        if raw is None:
            return None
        if not isinstance(raw, str):
            logger.warning(
                "Ignoring unreadable last selection",
                key=self.key,
                error=f"expected string, got {type(raw).__name__}"
            )
            return None

        try:
            return decode_last_selection(raw)
        except ValueError as e:
            logger.warning("Ignoring unreadable last selection", key=self.key, error=str(e))
            return None

    def clear_last_selection(self) -> None:
        self.store.remove(self.key)

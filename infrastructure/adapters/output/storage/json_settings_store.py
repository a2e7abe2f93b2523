"""
JSON File Settings Store - preferências do usuário num objeto JSON em disco
"""
import json
import os
from pathlib import Path
from typing import Dict, Optional, Union

from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class JsonFileSettingsStore:
    """
    Implementação de ISettingsStore em arquivo JSON

    - Arquivo contém um único objeto {chave: valor}
    - Escrita atômica (arquivo temporário + os.replace)
    - Arquivo ausente ou ilegível equivale a store vazio
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Args:
            path: Arquivo JSON (LAST_SELECTION_STORE_PATH se None)
        """
        self.path = Path(path or settings.LAST_SELECTION_STORE_PATH)

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read()
        values[key] = value
        self._write(values)

    def remove(self, key: str) -> None:
        values = self._read()
        if values.pop(key, None) is not None:
            self._write(values)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except ValueError as e:
            # Arquivo corrompido: tratado como vazio, a próxima escrita o substitui
            logger.warning("Ignoring unreadable settings file", path=str(self.path), error=str(e))
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring settings file without a JSON object", path=str(self.path))
            return {}
        return data

    def _write(self, values: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + '.tmp')

        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(values, f, ensure_ascii=False, indent=2)

        os.replace(tmp_path, self.path)
        logger.debug("Settings persisted", path=str(self.path), keys=len(values))

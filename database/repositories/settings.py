import json
import logging
from typing import Any, Optional

from sqlalchemy import select

from database.models import AppSettings
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class SettingsRepository(BaseRepository):
    def get_json(self, key: str) -> Optional[Any]:
        setting = self._one_or_none(
            select(AppSettings).where(AppSettings.key == key)
        )

        if setting is None or not setting.value:
            return None
        return json.loads(setting.value)

    def set_json(self, key: str, value: Any) -> None:
        setting = self._one_or_none(
            select(AppSettings).where(AppSettings.key == key)
        )

        payload = json.dumps(value, sort_keys=True)
        if setting:
            setting.value = payload
        else:
            self.db.add(AppSettings(key=key, value=payload))
        self.db.flush()

    def delete(self, key: str) -> bool:
        setting = self._one_or_none(
            select(AppSettings).where(AppSettings.key == key)
        )
        if setting is None:
            return False
        self.db.delete(setting)
        self.db.flush()
        return True

import logging
from pathlib import Path

from pydantic import ValidationError

from docreader.core.common.errors import ConfigParseError
from ..domain.interfaces import IConfigStore
from ..domain.models import AppConfig
from .atomic_file import atomic_write_text, read_text_or_none

logger = logging.getLogger(__name__)


class JsonConfigStore(IConfigStore):
    """
    AppConfig persisted as a pretty-printed JSON object with camelCase keys.
    Unset fields are omitted from the document.
    """

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> AppConfig:
        content = read_text_or_none(self.path)
        if content is None or not content.strip():
            return AppConfig()

        try:
            return AppConfig.model_validate_json(content)
        except ValidationError as e:
            raise ConfigParseError(f"Failed to parse config ({self.path}): {e}") from e

    def save(self, partial: AppConfig) -> AppConfig:
        try:
            current = self.load()
        except ConfigParseError as e:
            # A broken file must not lock the user out of changing settings
            logger.warning(f"Discarding unreadable config: {e}")
            current = AppConfig()

        merged = current.merged_with(partial)
        atomic_write_text(self.path, self.serialize(merged))
        return merged

    @staticmethod
    def serialize(config: AppConfig) -> str:
        return config.model_dump_json(by_alias=True, exclude_none=True, indent=2)

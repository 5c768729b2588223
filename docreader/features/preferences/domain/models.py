from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

U32_MAX = 2**32 - 1


class AppConfig(BaseModel):
    """
    User display preferences.
    None means "not set": omitted on disk and left untouched when merging.
    """
    model_config = ConfigDict(populate_by_name=True, strict=True)

    language: Optional[str] = None
    font_size_px: Optional[int] = Field(default=None, alias="fontSizePx", ge=0, le=U32_MAX)

    def merged_with(self, partial: "AppConfig") -> "AppConfig":
        """Returns a copy where every field set in partial overrides ours."""
        return self.model_copy(update=partial.model_dump(exclude_none=True))

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

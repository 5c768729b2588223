# File: docreader/core/common/enums.py

from enum import Enum, unique

@unique
class FileCategory(str, Enum):
    MINDMAP = "mindmap"
    MARPIT = "marpit"
    IMAGES = "images"
    VIDEO = "video"
    AUDIO = "audio"
    MARKDOWN = "markdown"
    DRAWIO = "drawio"
    PDF = "pdf"
    WORD = "word"
    EXCEL = "excel"
    TEXT = "text"
    SLIDES = "slides"
    NONE = "none"

    @property
    def is_supported(self) -> bool:
        return self is not FileCategory.NONE

@unique
class ScanStage(str, Enum):
    START = "start"
    PROGRESS = "progress"
    DONE = "done"

from pathlib import Path
from typing import Union

from docreader.core.common.enums import FileCategory
from ..domain.interfaces import IFileClassifier

class ExtensionClassifier(IFileClassifier):
    """
    Central logic for which files the viewer can preview.
    Compound suffixes are checked before the plain extension.
    """

    COMPOUND_SUFFIXES = (
        (".mm.md", FileCategory.MINDMAP),
        (".ppt.md", FileCategory.MARPIT),
    )

    EXTENSIONS = {
        ".png": FileCategory.IMAGES,
        ".jpg": FileCategory.IMAGES,
        ".jpeg": FileCategory.IMAGES,
        ".gif": FileCategory.IMAGES,
        ".webp": FileCategory.IMAGES,
        ".mp4": FileCategory.VIDEO,
        ".webm": FileCategory.VIDEO,
        ".ogv": FileCategory.VIDEO,
        ".m4v": FileCategory.VIDEO,
        ".mp3": FileCategory.AUDIO,
        ".wav": FileCategory.AUDIO,
        ".m4a": FileCategory.AUDIO,
        ".ogg": FileCategory.AUDIO,
        ".oga": FileCategory.AUDIO,
        ".flac": FileCategory.AUDIO,
        ".aac": FileCategory.AUDIO,
        ".md": FileCategory.MARKDOWN,
        ".markdown": FileCategory.MARKDOWN,
        ".drawio": FileCategory.DRAWIO,
        ".pdf": FileCategory.PDF,
        ".docx": FileCategory.WORD,
        ".xlsx": FileCategory.EXCEL,
        ".txt": FileCategory.TEXT,
        ".pptx": FileCategory.SLIDES,
    }

    def classify(self, path: Union[str, Path]) -> FileCategory:
        name = Path(path).name.lower()
        if not name:
            return FileCategory.NONE

        for suffix, category in self.COMPOUND_SUFFIXES:
            if name.endswith(suffix):
                return category

        # Path(".md").suffix is "" so dotfiles count as extensionless
        ext = Path(name).suffix
        return self.EXTENSIONS.get(ext, FileCategory.NONE)


_default = ExtensionClassifier()


def classify(path: Union[str, Path]) -> FileCategory:
    return _default.classify(path)

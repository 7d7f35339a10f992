"""Translator backed by per-language JSON catalogs."""

import json
from pathlib import Path

from voicy_common import setup_logging

from .interfaces import Translator

logger = setup_logging()

DEFAULT_LANGUAGE = "en"


class JsonTranslator(Translator):
    """Looks strings up in ``<language>.json`` files, falling back to English."""

    def __init__(self, catalogs: dict[str, dict[str, str]]):
        self._catalogs = catalogs

    @classmethod
    def from_directory(cls, locales_dir: Path) -> "JsonTranslator":
        catalogs = {
            path.stem: json.loads(path.read_text(encoding="utf-8"))
            for path in sorted(locales_dir.glob("*.json"))
        }
        logger.info(
            "Translations loaded",
            extra={"languages": sorted(catalogs), "locales_dir": str(locales_dir)},
        )
        return cls(catalogs)

    def translate(self, key: str, language: str) -> str:
        for candidate in (language, DEFAULT_LANGUAGE):
            text = self._catalogs.get(candidate, {}).get(key)
            if text is not None:
                return text
        logger.warning(
            "Missing translation", extra={"key": key, "language": language}
        )
        return key

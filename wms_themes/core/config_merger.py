"""Upsert of theme entries into themes.json and themesConfig.json."""

import json
import logging
from pathlib import Path
from typing import Any

from wms_themes.core.config import JSON_INDENT
from wms_themes.core.theme_shape import normalize_themes_config_document, normalize_themes_document
from wms_themes.models.merge_config import MergeConfig
from wms_themes.models.theme_entry import ThemeEntry
from wms_themes.models.themes_store import ThemesConfigStore, ThemesStore

logger = logging.getLogger(__name__)


def load_json_store(output_path: Path, template_path: Path) -> Any:
    """
    Load a JSON store, preferring a previously written output.

    Args:
        output_path: Output file of earlier runs
        template_path: Template used when no output exists yet

    Returns:
        Decoded JSON document

    Raises:
        FileNotFoundError: If neither file exists
        ValueError: If the file is not valid JSON
    """
    source = output_path if output_path.exists() else template_path
    if not source.exists():
        raise FileNotFoundError(f"Template not found: {template_path}")

    logger.debug(f"Loading {source}")
    try:
        with open(source, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {source}: {e}") from e


def write_json_store(path: Path, document: dict) -> None:
    """
    Write a JSON store with stable formatting.

    The document is serialized before the file is opened, so a value that is
    not valid JSON (NaN, Infinity) leaves the existing file untouched.

    Raises:
        ValueError: If the document contains non-finite numbers
    """
    text = json.dumps(document, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text + "\n")


class ConfigMerger:
    """Inserts or replaces one theme in both stores."""

    def __init__(self, config: MergeConfig):
        """
        Initialize merger.

        Args:
            config: Merge configuration holding template and output paths
        """
        self.config = config

    def load(self) -> tuple[ThemesStore, ThemesConfigStore]:
        """
        Load and normalize both stores.

        Returns:
            Tuple of (themes store, themes config store)
        """
        themes = normalize_themes_document(
            load_json_store(self.config.themes_output, self.config.themes_template)
        )
        themes_config = normalize_themes_config_document(
            load_json_store(self.config.themes_config_output, self.config.themes_config_template)
        )
        return themes, themes_config

    @staticmethod
    def upsert(themes: ThemesStore, themes_config: ThemesConfigStore, entry: ThemeEntry) -> None:
        """
        Replace any record of the entry's key with the entry.

        The entry is appended at the end of both sequences; fields of a
        replaced record are not carried over.
        """
        removed = themes.remove(entry.id)
        themes_config.remove(entry.id)
        if removed:
            logger.info(f"Replacing existing theme '{entry.id}'")

        themes.items.append(entry.to_dict())
        themes_config.themes.append(entry.to_summary())

    def write(self, themes: ThemesStore, themes_config: ThemesConfigStore) -> None:
        """
        Write both stores to their output paths.

        The two writes are not transactional: a failure writing
        themesConfig.json leaves an already updated themes.json behind.
        """
        write_json_store(self.config.themes_output, themes.to_dict())
        logger.info(f"Wrote themes to {self.config.themes_output}")

        write_json_store(self.config.themes_config_output, themes_config.to_dict())
        logger.info(f"Wrote themesConfig to {self.config.themes_config_output}")

    def merge(self, entry: ThemeEntry) -> tuple[ThemesStore, ThemesConfigStore]:
        """
        Load both stores, upsert the entry and write them back.

        Args:
            entry: Freshly built theme entry

        Returns:
            Tuple of the written (themes store, themes config store)
        """
        themes, themes_config = self.load()
        self.upsert(themes, themes_config, entry)
        self.write(themes, themes_config)
        return themes, themes_config

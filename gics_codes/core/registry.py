"""
Definition registry for versioned GICS tables.

Each GICS revision is a static table mapping code strings to their
name and optional description. The registry holds every loaded
revision, keyed by its effective date (YYYYMMDD), and resolves a
requested version to its table, defaulting to the latest.

Tables and the registry are read-only once built. The process-wide
registry is created on first use from configuration and shared.
"""

import json
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from threading import Lock
from types import MappingProxyType
from typing import Any

from ..models.gics_models import Definition
from ..observability.logging import get_logger, log_operation
from .errors import DefinitionTableError, UnsupportedVersionError
from .validation import code_depth, syntax_error

logger = get_logger(__name__)

DEFAULT_ALIAS = "default"
VERSION_FILE_PATTERN = re.compile(r"^(\d{8})\.json$")


class DefinitionTable(Mapping):
    """
    One version of the GICS definitions.

    A read-only mapping from code to Definition that preserves the
    source's key order. Entries are built once, with their code
    attached, and shared by every lookup.
    """

    def __init__(self, version: str, entries: Mapping[str, Any], source: str | None = None):
        self.version = str(version)
        self.source = source

        definitions = {}
        for code, raw in entries.items():
            definitions[code] = self._build_definition(code, raw)
        self._definitions = MappingProxyType(definitions)

    def _build_definition(self, code: Any, raw: Any) -> Definition:
        reason = syntax_error(code)
        if reason is not None:
            raise DefinitionTableError(
                f"Invalid key {code!r} in GICS {self.version} definitions: {reason}",
                source=self.source,
                version=self.version,
            )

        if isinstance(raw, Definition):
            return raw if raw.code == code else Definition(code, raw.name, raw.description)

        if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
            raise DefinitionTableError(
                f"Definition for {code} in GICS {self.version} must be an object with a name",
                source=self.source,
                version=self.version,
            )

        description = raw.get("description")
        if description is not None and not isinstance(description, str):
            raise DefinitionTableError(
                f"Description for {code} in GICS {self.version} must be a string",
                source=self.source,
                version=self.version,
            )

        return Definition(code=code, name=raw["name"], description=description)

    @classmethod
    def from_file(cls, path: Path, version: str | None = None) -> "DefinitionTable":
        """
        Load a table from a JSON object of code -> {name, description?}.

        The version defaults to the file stem (e.g. 20230318.json).
        """
        version = version or path.stem
        try:
            entries = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise DefinitionTableError(
                f"Cannot read GICS {version} definitions from {path}",
                source=str(path),
                version=version,
                cause=e,
            ) from e

        if not isinstance(entries, dict):
            raise DefinitionTableError(
                f"GICS {version} definitions in {path} must be a JSON object",
                source=str(path),
                version=version,
            )

        return cls(version, entries, source=str(path))

    def __getitem__(self, code: str) -> Definition:
        return self._definitions[code]

    def __contains__(self, code: object) -> bool:
        return code in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def at_depth(self, depth: int) -> list[Definition]:
        """All definitions at a structural depth, in table order."""
        return [d for code, d in self._definitions.items() if code_depth(code) == depth]

    def __repr__(self) -> str:
        return f"DefinitionTable(version={self.version!r}, codes={len(self)})"


class DefinitionRegistry:
    """
    Versioned set of definition tables with a designated default.

    Version identifiers are compared as strings, so 20230318 and
    "20230318" name the same table. The alias "default" resolves to the
    default version.
    """

    def __init__(
        self,
        tables: Mapping[Any, Mapping[str, Any]],
        default_version: str | int | None = None,
    ):
        if not tables:
            raise DefinitionTableError("No GICS definition tables were provided")

        loaded = {}
        for version, table in tables.items():
            version = str(version)
            if not isinstance(table, DefinitionTable):
                table = DefinitionTable(version, table)
            loaded[version] = table
        self._tables = MappingProxyType(loaded)

        if default_version is None:
            self._default_version = max(self._tables)
        else:
            self._default_version = str(default_version)
            if self._default_version not in self._tables:
                raise UnsupportedVersionError(default_version, self.versions)

    @classmethod
    @log_operation("load_definition_tables")
    def from_directory(
        cls, path: Path | str, default_version: str | int | None = None
    ) -> "DefinitionRegistry":
        """
        Load every <YYYYMMDD>.json table found in a directory.

        Args:
            path: Directory holding the table files
            default_version: Version used when none is requested (latest if None)

        Raises:
            DefinitionTableError: If the directory is missing, holds no tables,
                or a table cannot be read
        """
        path = Path(path)
        if not path.is_dir():
            raise DefinitionTableError(
                f"GICS definitions directory not found: {path}", source=str(path)
            )

        tables = {}
        for file_path in sorted(path.iterdir()):
            match = VERSION_FILE_PATTERN.match(file_path.name)
            if not match:
                continue

            table = DefinitionTable.from_file(file_path, version=match.group(1))
            tables[table.version] = table
            logger.info(
                f"Loaded GICS {table.version} definitions",
                data={
                    "version": table.version,
                    "codes": len(table),
                    "source": file_path.name,
                },
            )

        if not tables:
            raise DefinitionTableError(
                f"No GICS definition tables (YYYYMMDD.json) found in {path}", source=str(path)
            )

        return cls(tables, default_version=default_version)

    @property
    def versions(self) -> tuple[str, ...]:
        """Known version identifiers, oldest first."""
        return tuple(sorted(self._tables))

    @property
    def default_version(self) -> str:
        return self._default_version

    def resolve(self, version: str | int | None = None) -> DefinitionTable:
        """
        Get the table for a version.

        Args:
            version: Version identifier; omitted, empty or "default" selects
                the default version

        Returns:
            The DefinitionTable for that version

        Raises:
            UnsupportedVersionError: If the version is not loaded
        """
        if not version:
            return self._tables[self._default_version]

        key = str(version)
        if key == DEFAULT_ALIAS:
            return self._tables[self._default_version]

        table = self._tables.get(key)
        if table is None:
            raise UnsupportedVersionError(version, self.versions)
        return table

    def __contains__(self, version: object) -> bool:
        if version == DEFAULT_ALIAS:
            return True
        return str(version) in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return (
            f"DefinitionRegistry(versions={list(self.versions)}, "
            f"default={self._default_version!r})"
        )


# Singleton instance management
_registry_instance: DefinitionRegistry | None = None
_registry_lock = Lock()


def get_registry() -> DefinitionRegistry:
    """
    Get the process-wide definition registry.

    Loads the configured tables on first call; later calls return the
    cached registry.

    Raises:
        ConfigurationError: If the configured tables cannot be loaded
    """
    global _registry_instance

    if _registry_instance is None:
        from ..config import get_definitions_config

        with _registry_lock:
            if _registry_instance is None:
                config = get_definitions_config()
                _registry_instance = DefinitionRegistry.from_directory(
                    config.definitions_path, default_version=config.default_version
                )

    return _registry_instance


def reset_registry() -> None:
    """
    Drop the process-wide registry so the next lookup reloads it.

    Useful for testing or after changing configuration.
    """
    global _registry_instance
    with _registry_lock:
        _registry_instance = None

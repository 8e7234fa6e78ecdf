"""JSON-backed config store.

The store is the only code that touches ``config.json``. It exposes a small
field-level API over :class:`~resend_cli.models.ConfigSchema`; everything
above it (keyring, resolver, commands) goes through ``get``/``set``/``delete``.
"""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import msgspec

from resend_cli.config.paths import config_file
from resend_cli.errors import StoreError
from resend_cli.models import CONFIG_FIELDS
from resend_cli.models import ConfigSchema

logger = logging.getLogger(__name__)


class ConfigStore:
    """Field-level access to the persisted config document."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._pending: ConfigSchema | None = None
        self._depth = 0

    @property
    def path(self) -> Path:
        return self._path or config_file()

    def get(self, field: str) -> Any:
        """Return a field's value (a copy, for maps)."""
        _check_field(field)
        value = getattr(self._document(), field)
        if isinstance(value, dict):
            return dict(value)
        return value

    def set(self, field: str, value: Any) -> None:
        """Set a field. ``None`` is rejected; use :meth:`delete` instead."""
        _check_field(field)
        if value is None:
            raise ValueError(f"Cannot set '{field}' to None; use delete() to clear values")
        if isinstance(value, dict):
            value = dict(value)
        self._replace(**{field: value})

    def delete(self, field: str) -> None:
        """Reset a field to its default."""
        _check_field(field)
        default = getattr(ConfigSchema(), field)
        self._replace(**{field: default})

    def clear(self) -> None:
        """Reset every field to its default (only ``profile`` keeps a value)."""
        self._commit(ConfigSchema())

    @contextmanager
    def batch(self) -> Iterator[ConfigStore]:
        """Group mutations into a single write.

        Pending changes are discarded if the block raises.
        """
        if self._depth == 0:
            self._pending = self._load()
        self._depth += 1
        try:
            yield self
        except BaseException:
            self._depth -= 1
            if self._depth == 0:
                self._pending = None
            raise
        self._depth -= 1
        if self._depth == 0:
            document, self._pending = self._pending, None
            self._write(document)

    def _document(self) -> ConfigSchema:
        if self._pending is not None:
            return self._pending
        return self._load()

    def _replace(self, **changes: Any) -> None:
        self._commit(msgspec.structs.replace(self._document(), **changes))

    def _commit(self, document: ConfigSchema) -> None:
        if self._depth > 0:
            self._pending = document
        else:
            self._write(document)

    def _load(self) -> ConfigSchema:
        path = self.path
        if not path.exists():
            return ConfigSchema()
        try:
            data = path.read_bytes()
        except OSError as e:
            raise StoreError(f"Could not read config file {path}: {e.strerror or e}") from e
        if not data.strip():
            return ConfigSchema()
        try:
            return msgspec.json.decode(data, type=ConfigSchema)
        except msgspec.DecodeError as e:
            raise StoreError(f"Config file {path} is invalid: {e}") from e

    def _write(self, document: ConfigSchema) -> None:
        path = self.path
        content = msgspec.json.format(msgspec.json.encode(document), indent=2)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            # Write to temp file first, then rename for atomicity
            temp_path = path.with_suffix(".tmp")
            temp_path.write_bytes(content)
            temp_path.chmod(stat.S_IRUSR | stat.S_IWUSR)  # 0o600
            temp_path.replace(path)
        except OSError as e:
            raise StoreError(f"Could not write config file {path}: {e.strerror or e}") from e
        logger.debug("Wrote config to %s", path)


def _check_field(field: str) -> None:
    if field not in CONFIG_FIELDS:
        raise KeyError(f"Unknown config field: {field}")

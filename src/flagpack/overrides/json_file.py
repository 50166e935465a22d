#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Override store persisted in a JSON settings file."""

from __future__ import annotations

from collections.abc import Mapping
import json
from pathlib import Path
import threading
from typing import Any

from provide.foundation import logger
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_parent_dir

from flagpack.config.defaults import DEFAULT_OVERRIDE_NAMESPACE
from flagpack.exceptions import OverrideStoreError


class JsonFileOverrideStore:
    """Keeps local overrides under one namespace key of a JSON settings document.

    Other keys in the document belong to other users of the settings file and
    are preserved on every write. JSON keeps the distinction between bool,
    int, float and str, so values come back with the type they were set with.
    """

    def __init__(self, path: Path, namespace: str = DEFAULT_OVERRIDE_NAMESPACE) -> None:
        self.path = Path(path)
        self.namespace = namespace
        self._lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        return self.get_all().get(key)

    def get_all(self) -> dict[str, Any]:
        with self._lock:
            overrides = self._read_document().get(self.namespace, {})
        if not isinstance(overrides, dict):
            logger.warning(
                "Ignoring malformed override namespace",
                path=str(self.path),
                namespace=self.namespace,
            )
            return {}
        return overrides

    def set_all(self, overrides: Mapping[str, Any]) -> None:
        """Replace the stored overrides.

        Raises:
            OverrideStoreError: If a value is not JSON-serializable or the file
                cannot be written
        """
        with self._lock:
            document = self._read_document()
            document[self.namespace] = dict(overrides)
            self._write_document(document)
        logger.debug("Local overrides saved", path=str(self.path), count=len(overrides))

    def clear(self) -> None:
        with self._lock:
            document = self._read_document()
            if self.namespace not in document:
                return
            del document[self.namespace]
            self._write_document(document)
        logger.debug("Local overrides cleared", path=str(self.path))

    def _read_document(self) -> dict[str, Any]:
        """Read the settings document, reporting an unreachable medium as empty."""
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Override settings unreadable, treating as empty", path=str(self.path), error=str(e))
            return {}
        if not isinstance(document, dict):
            logger.warning("Override settings is not a JSON object, treating as empty", path=str(self.path))
            return {}
        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        try:
            content = json.dumps(document, indent=2, sort_keys=True)
        except (TypeError, ValueError) as e:
            raise OverrideStoreError(f"Override value cannot be stored as JSON: {e}") from e
        try:
            ensure_parent_dir(self.path)
            atomic_write_text(self.path, content)
        except OSError as e:
            raise OverrideStoreError(f"Unable to write override settings '{self.path}': {e}") from e


# 🚩📦🔚

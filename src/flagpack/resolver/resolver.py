#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Three-tier feature flag resolution: local override, remote snapshot, manifest default."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
import threading
from typing import Any, TypeVar

from attrs import define
from provide.foundation import logger

from flagpack.exceptions import ManifestError
from flagpack.manifest.model import Manifest, ValueKind
from flagpack.manifest.parser import load_manifest
from flagpack.overrides.base import OverrideStore
from flagpack.resolver.contract import RemoteConfigSource

T = TypeVar("T")


class ResolutionTier(str, Enum):
    """Where a resolved value came from, in priority order."""

    LOCAL = "local"
    REMOTE = "remote"
    DEFAULT = "default"


@define(frozen=True)
class Resolution:
    """A resolved feature value and the tier that supplied it."""

    key: str
    value: Any
    tier: ResolutionTier


class FeatureFlagResolver:
    """Resolves typed feature values from three ordered tiers.

    For each lookup the tiers are consulted in strict order and the first
    value whose type is exactly the requested one wins:

    1. the local override store, so values toggled from a debug menu win
    2. the latest remote snapshot
    3. the manifest defaults

    A value of the wrong type only means that tier cannot answer this
    request; the lookup moves on instead of failing. The typed accessors
    satisfy `FeatureFlagManager` and fall back to zero values, so a call
    site never sees an error.
    """

    def __init__(
        self,
        manifest: Manifest,
        override_store: OverrideStore,
        remote: Mapping[str, Any] | RemoteConfigSource | None = None,
    ) -> None:
        self.manifest = manifest
        self.override_store = override_store
        self._remote: Mapping[str, Any] | RemoteConfigSource = remote if remote is not None else {}
        self._mutation_lock = threading.RLock()

    @classmethod
    def from_manifest_path(
        cls,
        manifest_path: Path,
        override_store: OverrideStore,
        remote: Mapping[str, Any] | RemoteConfigSource | None = None,
    ) -> FeatureFlagResolver:
        """Build a resolver whose defaults come from a manifest file.

        A missing or invalid manifest is logged and leaves the resolver with
        no defaults; local and remote tiers keep working.
        """
        try:
            manifest = load_manifest(manifest_path)
        except ManifestError as e:
            logger.error(
                "Unable to load default feature values",
                path=str(manifest_path),
                kind=e.kind.value,
                error=str(e),
            )
            manifest = Manifest()
        return cls(manifest, override_store, remote)

    # =================================
    # Resolution
    # =================================

    def resolve(self, key: str, value_type: type[T]) -> T | None:
        """Resolve key to a value of exactly value_type, or None if no tier has one.

        Raises:
            TypeError: If value_type is not str, bool, int or float
        """
        resolution = self.lookup(key, value_type)
        return None if resolution is None else resolution.value

    def lookup(self, key: str, value_type: type | ValueKind) -> Resolution | None:
        """Resolve key like `resolve`, also reporting which tier answered."""
        kind = ValueKind.for_type(value_type)
        expected = kind.python_type

        local_value = self._local_value(key)
        if type(local_value) is expected:
            logger.trace("Feature resolved", key=key, kind=kind.value, tier=ResolutionTier.LOCAL.value)
            return Resolution(key=key, value=local_value, tier=ResolutionTier.LOCAL)

        remote_value = self._remote_value(key)
        if type(remote_value) is expected:
            logger.trace("Feature resolved", key=key, kind=kind.value, tier=ResolutionTier.REMOTE.value)
            return Resolution(key=key, value=remote_value, tier=ResolutionTier.REMOTE)

        default_value = self.manifest.default_for(key, kind)
        if default_value is not None:
            logger.trace("Feature resolved", key=key, kind=kind.value, tier=ResolutionTier.DEFAULT.value)
            return Resolution(key=key, value=default_value, tier=ResolutionTier.DEFAULT)

        logger.debug("Feature unresolved", key=key, kind=kind.value)
        return None

    def get_string(self, key: str) -> str:
        value = self.resolve(key, str)
        return "" if value is None else value

    def get_bool(self, key: str) -> bool:
        value = self.resolve(key, bool)
        return False if value is None else value

    def get_int(self, key: str) -> int:
        value = self.resolve(key, int)
        return 0 if value is None else value

    def get_double(self, key: str) -> float:
        value = self.resolve(key, float)
        return 0.0 if value is None else value

    # =================================
    # Remote snapshot
    # =================================

    def update_remote_snapshot(self, snapshot: Mapping[str, Any]) -> None:
        """Replace the remote tier with a new snapshot."""
        self._remote = dict(snapshot)
        logger.debug("Remote snapshot updated", count=len(self._remote))

    def _remote_value(self, key: str) -> Any | None:
        remote = self._remote
        try:
            snapshot = remote.snapshot() if isinstance(remote, RemoteConfigSource) else remote
            return snapshot.get(key)
        except Exception as e:
            logger.warning("Remote config unavailable, skipping remote tier", key=key, error=str(e))
            return None

    # =================================
    # Local overrides
    # =================================

    def _local_value(self, key: str) -> Any | None:
        try:
            return self.override_store.get(key)
        except Exception as e:
            logger.warning("Local override store unavailable, skipping local tier", key=key, error=str(e))
            return None

    def set_local_override(self, key: str, value: Any) -> None:
        """Store value as the local override for key, whatever its type."""
        with self._mutation_lock:
            overrides = self.override_store.get_all()
            overrides[key] = value
            self.override_store.set_all(overrides)
        logger.info("Local override set", key=key, value_type=type(value).__name__)

    def remove_local_override(self, key: str) -> None:
        with self._mutation_lock:
            overrides = self.override_store.get_all()
            if key not in overrides:
                return
            del overrides[key]
            self.override_store.set_all(overrides)
        logger.info("Local override removed", key=key)

    def has_local_overrides(self) -> bool:
        return len(self._all_local_values()) > 0

    def clear_local_overrides(self) -> None:
        with self._mutation_lock:
            self.override_store.clear()
        logger.info("Local overrides cleared")

    def local_overrides(self) -> dict[str, Any]:
        """Copy of the current local overrides, for display in a debug menu."""
        return self._all_local_values()

    def _all_local_values(self) -> dict[str, Any]:
        try:
            return dict(self.override_store.get_all())
        except Exception as e:
            logger.warning("Local override store unavailable, reporting no overrides", error=str(e))
            return {}


# 🚩📦🔚

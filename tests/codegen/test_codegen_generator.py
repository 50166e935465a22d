#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for feature accessor source generation."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import patch

from hypothesis import given, settings, strategies as st
import pytest

from flagpack.codegen import FeatureGenerator, GeneratedSource, generate
from flagpack.exceptions import GenerationError, OutputError
from flagpack.manifest import FeatureEntry, Manifest, parse_manifest
from flagpack.overrides import InMemoryOverrideStore
from flagpack.resolver import FeatureFlagResolver
from flagpack.utils import is_feature_key

EXPECTED_TWO_FEATURES = '''# Features.py
#
# -------- DO NOT EDIT THIS FILE --------
# This code is auto-generated by flagpack.
# To make changes:
#   1. Update the feature manifest.
#   2. Run 'flagpack' again.
# ---------------------------------------

"""Typed feature flag accessors."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class FeatureVariable(Enum):
    featureA = 'featureA'
    featureB = 'featureB'


class FeatureFlagManager(Protocol):
    def get_string(self, key: str) -> str: ...

    def get_bool(self, key: str) -> bool: ...

    def get_int(self, key: str) -> int: ...

    def get_double(self, key: str) -> float: ...


class Features:
    def __init__(self, feature_flag_manager: FeatureFlagManager) -> None:
        self._feature_flag_manager = feature_flag_manager

    @property
    def featureA(self) -> bool:
        """Enables the new onboarding flow"""
        return self._feature_flag_manager.get_bool(FeatureVariable.featureA.value)

    @property
    def featureB(self) -> str:
        return self._feature_flag_manager.get_string(FeatureVariable.featureB.value)
'''

feature_keys = st.from_regex(r"[a-z][A-Za-z0-9]{0,12}", fullmatch=True).filter(is_feature_key)
feature_values = st.one_of(
    st.text(max_size=20),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False, allow_infinity=False),
)


@st.composite
def manifests(draw: st.DrawFn) -> Manifest:
    keys = draw(st.lists(feature_keys, unique=True, max_size=8))
    return Manifest.from_entries(
        FeatureEntry.create(key, draw(feature_values), draw(st.text(max_size=30))) for key in keys
    )


def _load_module(source: GeneratedSource) -> dict[str, Any]:
    namespace: dict[str, Any] = {"__name__": "generated_features"}
    exec(compile(source.content, source.filename, "exec"), namespace)
    return namespace


class TestGenerate:
    """Test generated module content."""

    def test_exact_output(self) -> None:
        """The emitted module matches the expected layout byte for byte."""
        manifest = parse_manifest(
            b'[{"key": "featureA", "description": "Enables the new onboarding flow", "value": false},'
            b' {"key": "featureB", "description": "", "value": "SALE25"}]'
        )
        source = generate(manifest)
        assert source.filename == "Features.py"
        assert source.content == EXPECTED_TWO_FEATURES

    def test_sections_in_order(self, sample_manifest: Manifest) -> None:
        """Enum, then protocol, then facade."""
        content = generate(sample_manifest, "AppFeatures").content
        enum_at = content.index("class FeatureVariable(Enum):")
        protocol_at = content.index("class FeatureFlagManager(Protocol):")
        facade_at = content.index("class AppFeatures:")
        assert enum_at < protocol_at < facade_at

    def test_properties_follow_manifest_order(self, sample_manifest: Manifest) -> None:
        content = generate(sample_manifest).content
        positions = [content.index(f"def {key}(self)") for key in sample_manifest.keys()]
        assert positions == sorted(positions)

    def test_empty_manifest_compiles(self) -> None:
        """An empty enum still needs a body."""
        module = _load_module(generate(Manifest()))
        assert list(module["FeatureVariable"]) == []

    def test_awkward_descriptions_stay_inside_docstring(self) -> None:
        """Quotes, backslashes and newlines in descriptions cannot break the source."""
        manifest = Manifest.from_entries(
            [
                FeatureEntry.create("quoted", True, 'Say """hi"""'),
                FeatureEntry.create("escaped", True, "C:\\temp\\new"),
                FeatureEntry.create("multiline", True, "first\nsecond"),
            ]
        )
        module = _load_module(generate(manifest))
        facade = module["Features"]
        assert facade.quoted.__doc__ == 'Say """hi"""'
        assert facade.escaped.__doc__ == "C:\\temp\\new"
        assert facade.multiline.__doc__ == "first\nsecond"

    @pytest.mark.parametrize("name", ["1Bad", "with space", "class", "FeatureVariable", "FeatureFlagManager"])
    def test_rejects_bad_facade_name(self, name: str) -> None:
        with pytest.raises(GenerationError):
            FeatureGenerator(name)


class TestGeneratedFacade:
    """Test that generated code runs against the resolver."""

    def test_facade_delegates_to_typed_accessors(self, sample_manifest: Manifest) -> None:
        module = _load_module(generate(sample_manifest))
        resolver = FeatureFlagResolver(sample_manifest, InMemoryOverrideStore())
        features = module["Features"](resolver)

        assert features.featureA is False
        assert features.featureB == "SALE25"
        assert features.maxRetries == 3
        assert features.sampleRate == 0.25

        resolver.set_local_override("featureA", True)
        assert features.featureA is True

    def test_enum_values_are_keys(self, sample_manifest: Manifest) -> None:
        module = _load_module(generate(sample_manifest))
        assert [member.value for member in module["FeatureVariable"]] == sample_manifest.keys()

    def test_facade_uses_the_protocol_accessors(self, sample_manifest: Manifest) -> None:
        module = _load_module(generate(sample_manifest))
        manager = _RecordingManager()
        features = module["Features"](manager)
        _ = (features.featureA, features.featureB, features.maxRetries, features.sampleRate)
        assert manager.calls == [
            ("get_bool", "featureA"),
            ("get_string", "featureB"),
            ("get_int", "maxRetries"),
            ("get_double", "sampleRate"),
        ]


class TestGeneratedSourceWrite:
    """Test writing generated modules."""

    def test_write_creates_directory(self, tmp_path: Path, sample_manifest: Manifest) -> None:
        source = generate(sample_manifest)
        output = source.write(tmp_path / "nested" / "pkg")
        assert output == tmp_path / "nested" / "pkg" / "Features.py"
        assert output.read_text() == source.content

    def test_write_failure_raises_output_error(self, tmp_path: Path, sample_manifest: Manifest) -> None:
        source = generate(sample_manifest)
        with (
            patch("flagpack.codegen.generator.atomic_write_text", side_effect=PermissionError("read-only")),
            pytest.raises(OutputError, match="read-only"),
        ):
            source.write(tmp_path)
        assert not (tmp_path / "Features.py").exists()


class TestGenerationProperties:
    """Property tests for generation."""

    @settings(max_examples=50, deadline=None)
    @given(manifest=manifests())
    def test_generation_is_deterministic(self, manifest: Manifest) -> None:
        first = generate(manifest)
        second = generate(Manifest.from_entries(list(manifest)))
        assert first.content == second.content

    @settings(max_examples=50, deadline=None)
    @given(manifest=manifests())
    def test_generated_source_always_compiles(self, manifest: Manifest) -> None:
        module = _load_module(generate(manifest))
        assert [member.name for member in module["FeatureVariable"]] == manifest.keys()


class _RecordingManager:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def get_string(self, key: str) -> str:
        self.calls.append(("get_string", key))
        return ""

    def get_bool(self, key: str) -> bool:
        self.calls.append(("get_bool", key))
        return False

    def get_int(self, key: str) -> int:
        self.calls.append(("get_int", key))
        return 0

    def get_double(self, key: str) -> float:
        self.calls.append(("get_double", key))
        return 0.0


# 🚩📦🔚

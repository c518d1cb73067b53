"""Test settings and pipeline presets."""

import json
from pathlib import Path

import pytest

from fixed_ema.infrastructure.config import (
    build_filter_pipeline_config,
    create_filter_pipeline,
    get_settings,
    list_categories,
    list_presets,
    load_filter_preset,
    load_preset,
    resolve_preset_reference,
)


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self) -> None:
        """Test values without environment overrides."""
        settings = get_settings()

        assert settings.debug_checks is False
        assert settings.default_shift == 4
        assert settings.default_sample_type == "int32"
        assert settings.presets_dir.name == "presets"

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_debug_truthy(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        """Test accepted spellings of FIXED_EMA_DEBUG."""
        monkeypatch.setenv("FIXED_EMA_DEBUG", value)
        get_settings.cache_clear()

        assert get_settings().debug_checks is True

    def test_cached(self) -> None:
        """Test that get_settings returns a singleton."""
        assert get_settings() is get_settings()


class TestPresets:
    """Test the bundled presets."""

    def test_list(self) -> None:
        """Test bundled categories and presets."""
        assert list_categories() == ["filters"]
        assert list_presets("filters") == ["adc_10bit", "default", "heavy", "off"]
        assert list_presets("missing") == []

    def test_load(self) -> None:
        """Test loading the ADC preset."""
        preset = load_filter_preset("adc_10bit")

        assert preset["filters"][0] == {
            "name": "fixed_point_ema",
            "shift": 2,
            "sample_type": "int16",
            "input_bits": 10,
        }

    def test_unknown_category(self) -> None:
        """Test that an unknown category raises ValueError."""
        with pytest.raises(ValueError, match="filters"):
            load_preset("nope", "default")

    def test_unknown_preset(self) -> None:
        """Test that an unknown preset raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="adc_10bit"):
            load_preset("filters", "nope")

    def test_resolve_reference(self) -> None:
        """Test string, override and inline references."""
        assert resolve_preset_reference("off", "filters")["enabled"] is False
        assert resolve_preset_reference({"preset": "off", "enabled": True}, "filters")["enabled"] is True
        assert resolve_preset_reference({"filters": []}, "filters") == {"filters": []}

    def test_custom_presets_dir(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test FIXED_EMA_PRESETS_DIR."""
        category = tmp_path / "lab"
        category.mkdir()
        (category / "probe.json").write_text(json.dumps({"filters": []}), encoding="utf-8")
        monkeypatch.setenv("FIXED_EMA_PRESETS_DIR", str(tmp_path))
        get_settings.cache_clear()

        assert list_categories() == ["lab"]
        assert load_preset("lab", "probe") == {"filters": []}


class TestCreateFilterPipeline:
    """Test building pipelines from preset references."""

    def test_from_name(self) -> None:
        """Test the two-stage heavy preset."""
        pipeline = create_filter_pipeline("heavy")

        assert len(pipeline) == 2
        assert pipeline.filters[0].shift == 6

    def test_disabled(self) -> None:
        """Test that disabled configs give no pipeline."""
        assert create_filter_pipeline("off") is None
        assert create_filter_pipeline({"preset": "default", "enabled": False}) is None

    def test_override_filters(self) -> None:
        """Test that override filters replace the preset's."""
        pipeline = create_filter_pipeline({
            "preset": "default",
            "filters": [{"name": "fixed_point_ema", "shift": 1, "sample_type": "int8"}],
        })

        assert pipeline.filters[0].shift == 1
        assert pipeline.filters[0].sample_type.name == "int8"

    def test_inline(self) -> None:
        """Test inline configuration."""
        config = build_filter_pipeline_config({
            "filters": [{"name": "fixed_point_ema", "shift": 3}],
        })

        assert config["name"] == "custom"
        assert config["enabled"] is True
        assert len(create_filter_pipeline(config)) == 1

    def test_fallback(self) -> None:
        """Test that unsupported configs disable filtering."""
        assert build_filter_pipeline_config(None) == {"enabled": False, "filters": []}
        assert create_filter_pipeline(None) is None

    def test_default_preset_filters(self) -> None:
        """Test the default preset end to end."""
        pipeline = create_filter_pipeline("default")

        assert pipeline.filter(100) == 6

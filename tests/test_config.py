"""Tests for configuration loading."""

import pytest

from pdf_insight.config import DEFAULT_CONFIG, SummaryConfig, load_config, summary_config_from
from pdf_insight.exceptions import ConfigError, InsightError


class TestSummaryConfig:
    """Tests for SummaryConfig defaults."""

    def test_defaults(self):
        """Test the documented thresholds."""
        cfg = SummaryConfig()

        assert cfg.min_sentence_chars == 20
        assert cfg.min_paragraph_chars == 50
        assert cfg.min_content_chars == 100
        assert cfg.max_key_points == 8
        assert cfg.key_point_ratio == 0.15
        assert cfg.min_topic_matches == 3
        assert cfg.max_topics == 4
        assert cfg.words_per_page == 250

    def test_missing_section_keeps_defaults(self):
        """Test no summary section means default config."""
        assert summary_config_from({}) == DEFAULT_CONFIG
        assert summary_config_from(None) == DEFAULT_CONFIG
        assert summary_config_from({"summary": None}) == DEFAULT_CONFIG


class TestSummaryConfigFrom:
    """Tests for summary_config_from validation."""

    def test_overrides(self):
        """Test values override defaults and ints widen to floats."""
        cfg = summary_config_from({"summary": {"max_topics": 2, "key_point_ratio": 1}})

        assert cfg.max_topics == 2
        assert cfg.key_point_ratio == 1.0
        assert isinstance(cfg.key_point_ratio, float)
        assert cfg.max_key_points == 8

    @pytest.mark.parametrize(
        "section",
        [
            {"max_topic": 2},
            {"max_topics": True},
            {"max_topics": "4"},
            {"max_topics": 2.5},
            {"max_topics": -1},
            {"words_per_page": 0},
        ],
    )
    def test_invalid_values(self, section):
        """Test unknown keys and bad values are rejected."""
        with pytest.raises(ConfigError):
            summary_config_from({"summary": section})

    def test_zero_allowed_for_counts(self):
        """Test zero stays valid where it is not used as a divisor."""
        cfg = summary_config_from({"summary": {"max_key_points": 0}})

        assert cfg.max_key_points == 0

    def test_section_must_be_mapping(self):
        """Test a non-mapping summary section is rejected."""
        with pytest.raises(ConfigError):
            summary_config_from({"summary": [1, 2]})

    def test_config_error_is_insight_error(self):
        """Test the exception hierarchy."""
        err = ConfigError("bad")

        assert isinstance(err, InsightError)
        assert err.message == "bad"


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_yaml(self, tmp_path):
        """Test a YAML file loads into a dict."""
        path = tmp_path / "config.yml"
        path.write_text("include_ext: [.txt]\nsummary:\n  max_key_points: 5\n", encoding="utf-8")

        cfg = load_config(path)

        assert cfg["include_ext"] == [".txt"]
        assert summary_config_from(cfg).max_key_points == 5

    def test_empty_file(self, tmp_path):
        """Test an empty file is an empty config."""
        path = tmp_path / "config.yml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_non_mapping_root(self, tmp_path):
        """Test a list at the root is rejected."""
        path = tmp_path / "config.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        """Test a syntax error becomes ConfigError."""
        path = tmp_path / "config.yml"
        path.write_text("summary: [\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path)


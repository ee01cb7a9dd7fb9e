# -*- coding: utf-8 -*-
"""
Tests for analyzer configuration.

Covers the basic/extended presets, validation, and immutability.
"""

import dataclasses

import pytest

from seo_text_metrics.config import (
    DEFAULT_STOP_WORDS,
    AdviceThresholds,
    AnalyzerConfig,
    ScoringConfig,
)


class TestAnalyzerConfigPresets:
    """Tests for the named presets."""

    def test_defaults(self):
        config = AnalyzerConfig()

        assert config.stop_words == DEFAULT_STOP_WORDS
        assert config.min_related_length == 4
        assert config.related_keyword_limit == 15
        assert config.exclude_target_from_related is False
        assert config.count_distributed_matches is True
        assert config.scoring == ScoringConfig()
        assert config.advice == AdviceThresholds()

    def test_basic(self):
        config = AnalyzerConfig.basic()

        assert config.related_keyword_limit == 10
        assert config.exclude_target_from_related is True

    def test_extended(self):
        config = AnalyzerConfig.extended()

        assert config.related_keyword_limit == 15
        assert config.exclude_target_from_related is False

    def test_preset_overrides(self):
        config = AnalyzerConfig.basic(related_keyword_limit=3)

        assert config.related_keyword_limit == 3
        assert config.exclude_target_from_related is True

    def test_for_mode(self):
        assert AnalyzerConfig.for_mode("basic") == AnalyzerConfig.basic()
        assert AnalyzerConfig.for_mode("extended") == AnalyzerConfig.extended()

    def test_for_mode_invalid(self):
        with pytest.raises(ValueError, match="mode must be"):
            AnalyzerConfig.for_mode("full")


class TestAnalyzerConfigValidation:
    """Tests for config validation and immutability."""

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError, match="related_keyword_limit"):
            AnalyzerConfig(related_keyword_limit=-1)

    def test_min_length_rejected(self):
        with pytest.raises(ValueError, match="min_related_length"):
            AnalyzerConfig(min_related_length=0)

    def test_frozen(self):
        config = AnalyzerConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.related_keyword_limit = 3

    def test_with_overrides_returns_copy(self):
        config = AnalyzerConfig.extended()
        changed = config.with_overrides(related_keyword_limit=5)

        assert changed.related_keyword_limit == 5
        assert config.related_keyword_limit == 15

    def test_stop_words_stored_immutably(self):
        config = AnalyzerConfig(stop_words=["Alpha", "beta"])

        assert isinstance(config.stop_words, frozenset)
        assert config.is_stop_word("alpha")
        assert not config.is_stop_word("the")

    def test_frozenset_stop_words_lowercased(self):
        config = AnalyzerConfig(stop_words=frozenset({"The", "AND"}))

        assert config.stop_words == frozenset({"the", "and"})
        assert config.is_stop_word("the")


class TestStopWords:
    """Tests for the default stop-word list."""

    def test_common_function_words(self):
        for word in ("the", "and", "that", "this", "there", "about", "people"):
            assert word in DEFAULT_STOP_WORDS

    def test_lowercase(self):
        assert all(word == word.lower() for word in DEFAULT_STOP_WORDS)


class TestScoringConfig:
    """Tests for scoring tier validation."""

    def test_inverted_density_tier_rejected(self):
        with pytest.raises(ValueError, match="density tier"):
            ScoringConfig(density_tiers=((2.5, 0.5, 30),))

    def test_inverted_frequency_tier_rejected(self):
        with pytest.raises(ValueError, match="frequency tier"):
            ScoringConfig(frequency_tiers=((10, 3, 20),))

    def test_ascending_length_tiers_rejected(self):
        with pytest.raises(ValueError, match="length_tiers"):
            ScoringConfig(length_tiers=((50, 5), (500, 20)))

    def test_negative_max_score_rejected(self):
        with pytest.raises(ValueError, match="max_score"):
            ScoringConfig(max_score=-1)

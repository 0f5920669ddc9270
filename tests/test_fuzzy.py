"""Unit tests for canirun.match.fuzzy."""

import pytest

from canirun.match.fuzzy import (
    MatchScore,
    accept,
    best_match,
    fuzzy_match_hardware,
    match_phrase,
    split_alternatives,
    strip_spec_noise,
    tokenize,
)


# ============================================================================
# tokenize / split
# ============================================================================
class TestTokenize:
    @pytest.mark.parametrize("inp,expected", [
        ("GeForce® GTX 1060 6GB", ["geforce", "gtx", "1060", "6", "gb"]),
        ("(6 GB)", ["6", "gb"]),
        ("Intel Core i7-3770K", ["intel", "core", "i7", "3770", "k"]),
        ("Radeon RX 470/570", ["radeon", "rx", "470", "570"]),
        ("", []),
    ])
    def test_tokens(self, inp, expected):
        assert tokenize(inp) == expected

    def test_split_alternatives_case_insensitive(self):
        assert split_alternatives("GTX 970 or RX 470 OR Arc A380") == ["GTX 970", "RX 470", "Arc A380"]

    def test_split_alternatives_ignores_embedded_or(self):
        # "or" must be a separate word with spaces on both sides
        assert split_alternatives("Core i5 Processor") == ["Core i5 Processor"]

    def test_strip_spec_noise(self):
        out = strip_spec_noise("Intel Core i5-2500K @ 3.3 GHz 4 cores 8 threads")
        assert "ghz" not in out.lower()
        assert "cores" not in out.lower()
        assert "threads" not in out.lower()
        assert "2500K" in out


# ============================================================================
# matching
# ============================================================================
class TestFuzzyMatchHardware:
    def test_exact_model_wins(self):
        candidates = ["NVIDIA GeForce RTX 3070", "NVIDIA GeForce RTX 3060"]
        assert fuzzy_match_hardware("NVIDIA GeForce RTX 3070", candidates) == "NVIDIA GeForce RTX 3070"

    def test_model_number_dominates(self):
        candidates = ["NVIDIA GeForce RTX 3070", "NVIDIA GeForce RTX 3060"]
        assert fuzzy_match_hardware("RTX 3060", candidates) == "NVIDIA GeForce RTX 3060"

    def test_unrelated_text_is_none(self, catalog):
        assert fuzzy_match_hardware("totally unrelated text", catalog.names("gpu")) is None

    @pytest.mark.parametrize("inp", ["", "   ", None])
    def test_empty_input(self, inp):
        assert fuzzy_match_hardware(inp, ["NVIDIA GeForce RTX 3070"]) is None

    def test_split_memory_size(self):
        candidates = ["NVIDIA GeForce GTX 1060 3GB", "NVIDIA GeForce GTX 1060 6GB"]
        assert fuzzy_match_hardware("GeForce GTX 1060 (6 GB)", candidates) == "NVIDIA GeForce GTX 1060 6GB"

    def test_renderer_string_noise_dropped(self, catalog):
        renderer = "ANGLE (NVIDIA, NVIDIA GeForce RTX 3070 Direct3D11 vs_5_0 ps_5_0, D3D11)"
        assert fuzzy_match_hardware(renderer, catalog.names("gpu")) == "NVIDIA GeForce RTX 3070"

    def test_clock_speed_does_not_pollute(self, catalog):
        assert fuzzy_match_hardware("Intel Core i5-2500K @ 3.30GHz", catalog.names("cpu")) == "Intel Core i5-2500K"

    def test_alternatives_matched_independently(self):
        candidates = ["Intel Core i7-3770K", "AMD FX-8350"]
        result = best_match("Intel Core i7-3770K or AMD FX-8350", candidates)
        assert result.normalized == 1.0
        # both alternatives score 1.0; the higher raw hit weight wins
        assert result.candidate == "Intel Core i7-3770K"

    def test_suffix_variant_prefers_full_hit(self):
        candidates = ["NVIDIA GeForce RTX 3070", "NVIDIA GeForce RTX 3070 Ti"]
        assert fuzzy_match_hardware("RTX 3070 Ti", candidates) == "NVIDIA GeForce RTX 3070 Ti"
        assert fuzzy_match_hardware("GeForce RTX 3070", candidates) == "NVIDIA GeForce RTX 3070"

    def test_deterministic(self, catalog):
        names = catalog.names("gpu")
        first = [fuzzy_match_hardware(t, names) for t in ("GTX 970", "RX 580", "Iris Xe")]
        second = [fuzzy_match_hardware(t, names) for t in ("GTX 970", "RX 580", "Iris Xe")]
        assert first == second


class TestSeriesRule:
    CANDIDATES = ["NVIDIA GeForce GTX 650", "NVIDIA GeForce GTX 750"]

    def test_series_matches_same_hundred(self):
        assert match_phrase("NVIDIA GeForce GTX 600 series", self.CANDIDATES) == "NVIDIA GeForce GTX 650"

    def test_without_series_needs_exact_number(self):
        assert match_phrase("NVIDIA GeForce GTX 600", self.CANDIDATES) is None

    def test_series_does_not_cross_hundreds(self):
        assert match_phrase("NVIDIA GeForce GTX 600 series", ["NVIDIA GeForce GTX 750"]) is None


class TestThreshold:
    def test_exactly_sixty_percent_matches(self):
        # 3 of 5 plain-word tokens hit -> 0.60
        assert match_phrase("alpha bravo charlie", ["alpha bravo charlie delta echo"]) == (
            "alpha bravo charlie delta echo"
        )

    def test_below_threshold_rejected(self):
        assert match_phrase("alpha bravo", ["alpha bravo charlie delta echo"]) is None

    @pytest.mark.parametrize("normalized,expected", [
        (0.60, "x"),
        (0.599, None),
        (1.0, "x"),
    ])
    def test_accept_boundary(self, normalized, expected):
        assert accept(MatchScore("x", normalized, 1)) == expected

    def test_accept_none(self):
        assert accept(None) is None

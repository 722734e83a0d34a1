"""
Tests for net score weighting and result formatting.
"""

import pytest

from oss_net_score.scoring import (
    WEIGHTS,
    NetScoreResult,
    compute_net_score,
    format_score,
)


class TestFormatScore:
    """Test the five-decimal score formatter."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.0, "1"),
            (0.5, "0.5"),
            (0.0, "0"),
            (0.33333, "0.33333"),
            (0.123456, "0.12346"),
            (1 / 3, "0.33333"),
            (2 / 3, "0.66667"),
            (0.1, "0.1"),
            (0.10001, "0.10001"),
            (0.000001, "0"),
            (10.0, "10"),
        ],
    )
    def test_format_score(self, value, expected):
        assert format_score(value) == expected

    def test_exact_binary_tie_rounds_half_up(self):
        """1/64 = 0.015625 exactly; the tie rounds up like toFixed(5)."""
        assert format_score(1 / 64) == "0.01563"

    @pytest.mark.parametrize("value", [0.25, 0.8333333, 0.61, 0.7000004, 1.0, 0.0])
    def test_no_trailing_zeros_or_bare_point(self, value):
        text = format_score(value)
        assert not text.endswith(".")
        if "." in text:
            assert not text.endswith("0")
            assert len(text.split(".")[1]) <= 5

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError):
            format_score(float("nan"))


class TestComputeNetScore:
    """Test the weighted net score."""

    def test_weights_sum_to_one(self):
        assert sum(WEIGHTS.values()) == pytest.approx(1.0)
        assert WEIGHTS == {
            "responsiveness": 0.30,
            "bus_factor": 0.40,
            "correctness": 0.15,
            "ramp_up": 0.15,
        }

    def test_missing_license_zeroes_score(self):
        assert compute_net_score(0, 1, 1, 1, 1) == 0

    def test_all_perfect_scores(self):
        net = compute_net_score(1, 1, 1, 1, 1)
        assert net == pytest.approx(1.0)
        assert format_score(net) == "1"

    def test_weighting(self):
        net = compute_net_score(1, 1 - 1 / 6, 0.6, 0.7, 0.4)
        assert net == pytest.approx(0.3 * (5 / 6) + 0.4 * 0.6 + 0.15 * 0.7 + 0.15 * 0.4)
        assert format_score(net) == "0.655"

    def test_each_weight_in_isolation(self):
        assert compute_net_score(1, 1, 0, 0, 0) == pytest.approx(0.30)
        assert compute_net_score(1, 0, 1, 0, 0) == pytest.approx(0.40)
        assert compute_net_score(1, 0, 0, 1, 0) == pytest.approx(0.15)
        assert compute_net_score(1, 0, 0, 0, 1) == pytest.approx(0.15)


class TestNetScoreResult:
    """Test result construction and rendering."""

    def test_from_scores(self):
        result = NetScoreResult.from_scores(
            "https://github.com/acme/widget",
            {
                "license": 1,
                "responsiveness": 0.5,
                "bus_factor": 0.5,
                "correctness": 0.5,
                "ramp_up": 0.5,
            },
        )
        assert result.url == "https://github.com/acme/widget"
        assert result.net_score == pytest.approx(0.5)
        assert result.license == 1

    def test_to_json_line(self):
        result = NetScoreResult(
            url="https://www.npmjs.com/package/widget",
            net_score=0.655,
            ramp_up=0.4,
            correctness=0.7,
            bus_factor=0.6,
            responsiveness=1 - 1 / 6,
            license=1,
        )
        assert result.to_json_line() == (
            '{"URL":"https://www.npmjs.com/package/widget", "NET_SCORE":0.655, '
            '"RAMP_UP_SCORE":0.4, "CORRECTNESS_SCORE":0.7, "BUS_FACTOR_SCORE":0.6, '
            '"RESPONSIVE_MAINTAINER_SCORE":0.83333, "LICENSE_SCORE":1}'
        )

    def test_json_line_escapes_url(self):
        result = NetScoreResult('https://github.com/a/b"c', 0, 0, 0, 0, 0, 0)
        assert result.to_json_line().startswith('{"URL":"https://github.com/a/b\\"c", ')

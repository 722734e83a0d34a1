"""
Net score weighting and result formatting.
"""

import json
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

# Weights of the non-license metrics; they sum to 1.0. License is not
# weighted: it multiplies the weighted sum, so an unlicensed repository
# always scores 0.
WEIGHTS = {
    "responsiveness": 0.30,
    "bus_factor": 0.40,
    "correctness": 0.15,
    "ramp_up": 0.15,
}

SCORE_DECIMALS = 5
_QUANTUM = Decimal(1).scaleb(-SCORE_DECIMALS)
_TRAILING_ZEROS = re.compile(r"\.?0*$")


def compute_net_score(
    license_score: float,
    responsiveness: float,
    bus_factor: float,
    correctness: float,
    ramp_up: float,
) -> float:
    """
    Combine metric scores into the net score.

    netScore = license * (0.30 * responsiveness + 0.40 * bus_factor
                          + 0.15 * correctness + 0.15 * ramp_up)
    """
    return license_score * (
        responsiveness * WEIGHTS["responsiveness"]
        + bus_factor * WEIGHTS["bus_factor"]
        + correctness * WEIGHTS["correctness"]
        + ramp_up * WEIGHTS["ramp_up"]
    )


def format_score(value: float) -> str:
    """
    Render a score with at most five decimals and no trailing zeros.

    Rounding is half-up on the exact binary value of the float, so
    ``format_score(0.5) == "0.5"``, ``format_score(1.0) == "1"`` and
    ``format_score(0.123456) == "0.12346"``.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite score: {value}")

    fixed = f"{Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP):f}"
    return _TRAILING_ZEROS.sub("", fixed, count=1)


class NetScoreResult(NamedTuple):
    """Scores for one input URL."""

    url: str
    net_score: float
    ramp_up: float
    correctness: float
    bus_factor: float
    responsiveness: float
    license: float

    @classmethod
    def from_scores(cls, url: str, scores: dict[str, float]) -> "NetScoreResult":
        """Build a result from per-metric scores keyed by field name."""
        return cls(
            url=url,
            net_score=compute_net_score(
                scores["license"],
                scores["responsiveness"],
                scores["bus_factor"],
                scores["correctness"],
                scores["ramp_up"],
            ),
            ramp_up=scores["ramp_up"],
            correctness=scores["correctness"],
            bus_factor=scores["bus_factor"],
            responsiveness=scores["responsiveness"],
            license=scores["license"],
        )

    def to_json_line(self) -> str:
        """Render the single-line JSON record written to standard output."""
        fields = [
            ("URL", json.dumps(self.url, ensure_ascii=False)),
            ("NET_SCORE", format_score(self.net_score)),
            ("RAMP_UP_SCORE", format_score(self.ramp_up)),
            ("CORRECTNESS_SCORE", format_score(self.correctness)),
            ("BUS_FACTOR_SCORE", format_score(self.bus_factor)),
            ("RESPONSIVE_MAINTAINER_SCORE", format_score(self.responsiveness)),
            ("LICENSE_SCORE", format_score(self.license)),
        ]
        return "{" + ", ".join(f'"{name}":{value}' for name, value in fields) + "}"

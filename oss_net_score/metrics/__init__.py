"""
Metric registry.

Metrics run in the order listed here, one after another.
"""

from oss_net_score.metrics.base import (
    MetricContext,
    MetricOutcome,
    MetricSpec,
    evaluate_metric,
)
from oss_net_score.metrics.bus_factor import METRIC as BUS_FACTOR
from oss_net_score.metrics.correctness import METRIC as CORRECTNESS
from oss_net_score.metrics.license import METRIC as LICENSE
from oss_net_score.metrics.ramp_up import METRIC as RAMP_UP
from oss_net_score.metrics.responsiveness import METRIC as RESPONSIVENESS

__all__ = [
    "MetricContext",
    "MetricOutcome",
    "MetricSpec",
    "evaluate_metric",
    "load_metric_specs",
]

_METRIC_SPECS: tuple[MetricSpec, ...] = (
    BUS_FACTOR,
    LICENSE,
    RESPONSIVENESS,
    RAMP_UP,
    CORRECTNESS,
)


def load_metric_specs() -> list[MetricSpec]:
    """Return the metric specs in evaluation order."""
    return list(_METRIC_SPECS)

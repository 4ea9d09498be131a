"""
Prometheus Metrics Registration.

Custom metrics for tool preparation.
"""

from prometheus_client import Counter, Histogram

# ============================================================================
# COUNTERS
# ============================================================================

tool_preparations_total = Counter(
    "tool_preparations_total",
    "Tool prepare hook outcomes",
    ["tool_name", "status"],  # available, unavailable
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

tools_prepare_duration = Histogram(
    "tools_prepare_duration_seconds",
    "Complete tools preparation pipeline duration",
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0),
)

"""Readiness aggregator -- ready and desired pod counts across controllers."""

from kubegen.readiness.aggregator import count_ready_pods, is_pod_ready, ready_count, total_replicas

__all__ = ["count_ready_pods", "is_pod_ready", "ready_count", "total_replicas"]

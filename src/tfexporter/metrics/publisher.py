"""
Pushgateway publisher.

Pushes a MetricSet as one batch. A fresh registry is built for every push
so nothing carries over between runs in the same process.
"""

from __future__ import annotations

import structlog
from prometheus_client import CollectorRegistry
from prometheus_client import Gauge as PromGauge
from prometheus_client import push_to_gateway

from tfexporter.core.errors import ConfigurationError, PublishError
from tfexporter.metrics.models import MetricSet

logger = structlog.get_logger()


def build_registry(metrics: MetricSet) -> CollectorRegistry:
    """Register one Prometheus gauge per entry in the set."""
    registry = CollectorRegistry()
    for gauge in metrics:
        PromGauge(gauge.name, gauge.help, registry=registry).set(gauge.value)
    return registry


class PushgatewayPublisher:
    """Pushes metric batches to a Prometheus Pushgateway."""

    def __init__(self, address: str | None, job: str, *, timeout: float = 30.0) -> None:
        if not address:
            raise ConfigurationError(
                "No Pushgateway configured",
                details={"hint": "set PUSHGATEWAY_URL or pass --pushgateway-url"},
            )
        self._address = address
        self._job = job
        self._timeout = timeout

    @property
    def address(self) -> str:
        return self._address

    def publish(self, metrics: MetricSet, grouping: dict[str, str] | None = None) -> None:
        """Push the whole batch, replacing the previous batch for this group.

        Raises:
            PublishError: If the gateway is unreachable or rejects the push
        """
        registry = build_registry(metrics)
        try:
            push_to_gateway(
                self._address,
                job=self._job,
                registry=registry,
                grouping_key=grouping or {},
                timeout=self._timeout,
            )
        except OSError as e:
            raise PublishError(
                f"Failed to push metrics: {e}",
                details={"gateway": self._address, "job": self._job},
            ) from e

        logger.info(
            "metrics_published",
            gateway=self._address,
            job=self._job,
            gauges=len(metrics),
            **(grouping or {}),
        )

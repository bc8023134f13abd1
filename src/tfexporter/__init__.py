"""
Terraform run metrics exporter.

Interprets the artifacts of a Terraform CI run (JSON plan, apply log,
refresh log) and publishes them as gauges to a Prometheus Pushgateway.
"""

__version__ = "0.1.0"

"""
CLI command for collecting and pushing Terraform run metrics.

Commands:
    tfexporter collect                      - Collect from env and push
    tfexporter collect --dry-run            - Collect and print, no push
    tfexporter collect --dry-run --output json
"""

from __future__ import annotations

from typing import Optional

from rich.table import Table

from tfexporter.cli.ux import console, header, info, success
from tfexporter.config.settings import Settings, load_settings
from tfexporter.core.errors import ExitCode, main_with_error_handling
from tfexporter.logging import bind_context
from tfexporter.metrics.collector import collect_from_settings
from tfexporter.metrics.models import MetricSet
from tfexporter.metrics.publisher import PushgatewayPublisher


@main_with_error_handling()
def collect_command(
    plan_path: Optional[str] = None,
    apply_log_path: Optional[str] = None,
    refresh_log_path: Optional[str] = None,
    start_time: Optional[str] = None,
    pushgateway_url: Optional[str] = None,
    job: Optional[str] = None,
    dry_run: bool = False,
    output_format: str = "table",
    strict_plan: bool = False,
    settings: Optional[Settings] = None,
) -> int:
    """
    Collect metrics for a Terraform run and push them to the Pushgateway.

    Arguments override the values read from the environment.

        0 - Metrics collected (and pushed unless dry run)
        10 - No Pushgateway configured or invalid settings
        11 - Push failed
        12 - Plan unusable with --strict-plan

    Returns:
        Exit code
    """
    settings = _apply_overrides(
        settings or load_settings(),
        terraform_plan_path=plan_path,
        terraform_apply_log_path=apply_log_path,
        terraform_refresh_log_path=refresh_log_path,
        terraform_start_time=start_time,
        pushgateway_url=pushgateway_url,
        pushgateway_job=job,
        strict_plan=strict_plan or None,
    )

    log = bind_context(run_id=settings.github_run_id or None, job=settings.pushgateway_job)
    log.debug("collect_started", plan=settings.terraform_plan_path)

    # Fail on missing gateway before doing any work
    publisher = None
    if not dry_run:
        publisher = PushgatewayPublisher(
            settings.pushgateway_address(),
            settings.pushgateway_job,
            timeout=settings.push_timeout,
        )

    run = collect_from_settings(settings)
    metrics = run.to_metric_set()

    if output_format == "json":
        console.print_json(data=metrics.as_dict())
    else:
        _print_metrics_table(metrics)

    if publisher is None:
        info("Dry run: metrics not pushed")
        return ExitCode.SUCCESS

    publisher.publish(metrics, settings.grouping_labels())
    if output_format != "json":
        success(f"Pushed {len(metrics)} gauges to {publisher.address}")
    return ExitCode.SUCCESS


def _apply_overrides(settings: Settings, **overrides: object) -> Settings:
    update = {key: value for key, value in overrides.items() if value is not None}
    if not update:
        return settings
    return settings.model_copy(update=update)


def _print_metrics_table(metrics: MetricSet) -> None:
    header("Terraform Run Metrics")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Gauge")
    table.add_column("Value", justify="right")
    table.add_column("Help", style="muted")

    for gauge in metrics:
        value = f"{gauge.value:.0f}" if gauge.value.is_integer() else f"{gauge.value:.3f}"
        table.add_row(gauge.name, value, gauge.help)

    console.print(table)

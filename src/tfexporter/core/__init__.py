"""Core utilities shared across tfexporter."""

from tfexporter.core.errors import (
    ConfigurationError,
    DuplicateGaugeError,
    ExitCode,
    InputError,
    PlanDecodeError,
    PublishError,
    TfExporterError,
    main_with_error_handling,
)

__all__ = [
    "ExitCode",
    "TfExporterError",
    "ConfigurationError",
    "PublishError",
    "InputError",
    "PlanDecodeError",
    "DuplicateGaugeError",
    "main_with_error_handling",
]

"""Tests for error types and the CLI error handling decorator."""

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


class TestErrors:
    def test_exit_codes(self):
        assert ConfigurationError("x").exit_code == ExitCode.CONFIG_ERROR
        assert PublishError("x").exit_code == ExitCode.PUBLISH_ERROR
        assert InputError("x").exit_code == ExitCode.INPUT_ERROR
        assert PlanDecodeError("x").exit_code == ExitCode.INPUT_ERROR

    def test_details_default(self):
        error = TfExporterError("boom")

        assert error.message == "boom"
        assert error.details == {}

    def test_duplicate_gauge_is_value_error(self):
        assert issubclass(DuplicateGaugeError, ValueError)
        assert issubclass(DuplicateGaugeError, TfExporterError)


class TestMainWithErrorHandling:
    def test_success_passthrough(self):
        @main_with_error_handling()
        def command():
            return 0

        assert command() == 0

    def test_known_error(self):
        @main_with_error_handling()
        def command():
            raise PublishError("gateway down", details={"gateway": "http://gw:9091"})

        assert command() == ExitCode.PUBLISH_ERROR

    def test_unexpected_error(self):
        @main_with_error_handling()
        def command():
            raise RuntimeError("surprise")

        assert command() == ExitCode.UNKNOWN_ERROR

    def test_keyboard_interrupt(self):
        @main_with_error_handling(log_errors=False)
        def command():
            raise KeyboardInterrupt

        assert command() == 130

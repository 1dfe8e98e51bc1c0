"""
Tests for the error handling system.

This module tests the user-input error taxonomy, error reports with
correction suggestions, statistics and diagnostic reporting.
"""

import logging
from datetime import datetime

import pytest

from carrier_modulator.config_manager import ConfigurationError
from carrier_modulator.error_handling import (
    BitCountMismatchError,
    ErrorCategory,
    ErrorContext,
    ErrorHandler,
    ErrorReport,
    ErrorSeverity,
    InvalidBitStringError,
    InvalidDurationError,
    ModulationError,
    UnsupportedSchemeError,
    create_error_context,
    get_error_handler,
    handle_error,
)


class TestErrorClasses:
    """Test custom error classes."""

    def test_modulation_error_creation(self):
        error = ModulationError("Test error", ErrorCategory.SYSTEM_ERROR, ErrorSeverity.HIGH)

        assert str(error) == "Test error"
        assert error.category == ErrorCategory.SYSTEM_ERROR
        assert error.severity == ErrorSeverity.HIGH
        assert error.user_message == "Test error"
        assert isinstance(error.timestamp, datetime)

    def test_invalid_bit_string_error(self):
        error = InvalidBitStringError("bad bits", "01a")

        assert error.category == ErrorCategory.INVALID_BIT_STRING
        assert error.bits == "01a"
        assert error.user_message == "Please enter a valid bit sequence (only 0 and 1)."

    def test_invalid_duration_error(self):
        error = InvalidDurationError("bad duration", -1)

        assert error.category == ErrorCategory.INVALID_DURATION
        assert error.value == -1

    def test_unsupported_scheme_error(self):
        error = UnsupportedSchemeError("bad scheme", "16QAM")

        assert error.category == ErrorCategory.UNSUPPORTED_SCHEME
        assert error.selector == "16QAM"

    def test_bit_count_mismatch_error(self):
        error = BitCountMismatchError("mismatch", bit_count=7, bits_per_symbol=3, order=8)

        assert error.category == ErrorCategory.BIT_COUNT_MISMATCH
        assert error.bit_count == 7
        assert error.user_message == "The number of bits must be a multiple of 3 for 8-QAM."

    def test_all_input_errors_are_modulation_errors(self):
        for error_class in (
            InvalidBitStringError,
            InvalidDurationError,
            UnsupportedSchemeError,
            BitCountMismatchError,
        ):
            assert issubclass(error_class, ModulationError)


class TestErrorHandler:
    """Test ErrorHandler functionality."""

    @pytest.fixture
    def handler(self):
        return ErrorHandler()

    def test_handle_input_error(self, handler):
        report = handler.handle_error(InvalidBitStringError("bad bits", "01a2"))

        assert isinstance(report, ErrorReport)
        assert report.error_id.startswith("ERR_")
        assert report.category == ErrorCategory.INVALID_BIT_STRING
        assert report.severity == ErrorSeverity.MEDIUM
        assert report.user_message == "Please enter a valid bit sequence (only 0 and 1)."
        assert "Remove the characters: '2', 'a'" in report.suggestions
        assert report.diagnostic_data["invalid_characters"] == ["2", "a"]
        assert isinstance(report.context, ErrorContext)

    def test_empty_bit_string_suggestion(self, handler):
        report = handler.handle_error(InvalidBitStringError("empty", ""))

        assert "Enter at least one bit" in report.suggestions

    def test_bit_count_suggestions(self, handler):
        error = BitCountMismatchError("mismatch", bit_count=5, bits_per_symbol=3, order=8)
        report = handler.handle_error(error)

        assert report.suggestions == ["Append 1 bit(s) or remove 2 bit(s)"]
        assert report.diagnostic_data["remainder"] == 2

    def test_scheme_suggestions(self, handler):
        report = handler.handle_error(UnsupportedSchemeError("bad", "QPSK"))

        assert report.suggestions == ["Choose one of: ASK, PSK, FSK, 4PSK, 4QAM, 8QAM"]
        assert report.diagnostic_data["received_selector"] == "'QPSK'"

    def test_bit_limit_suggestions(self, handler):
        error = InvalidBitStringError(
            "Bit sequence has 5000 bits, limit is 4096",
            5000,
            limit=4096,
            user_message="Bit sequence exceeds the 4096-bit limit.",
        )
        report = handler.handle_error(error)

        assert report.user_message == "Bit sequence exceeds the 4096-bit limit."
        assert report.suggestions == ["Send at most 4096 bits per request"]
        assert report.diagnostic_data == {"max_bits": 4096}

    def test_sample_limit_suggestions(self, handler):
        error = InvalidDurationError("too many samples", 1000.0, limit=5000000)
        report = handler.handle_error(error)

        assert report.suggestions == ["Use a shorter symbol time or fewer bits"]
        assert report.diagnostic_data["max_samples"] == 5000000

    def test_duration_suggestions(self, handler):
        report = handler.handle_error(InvalidDurationError("bad", "abc"))

        assert report.diagnostic_data["received_value"] == "'abc'"
        assert len(report.suggestions) == 1

    def test_classify_foreign_errors(self, handler):
        report = handler.handle_error(ConfigurationError("Configuration validation failed"))
        assert report.category == ErrorCategory.CONFIGURATION_ERROR
        assert report.severity == ErrorSeverity.HIGH

        report = handler.handle_error(RuntimeError("boom"))
        assert report.category == ErrorCategory.SYSTEM_ERROR
        assert report.user_message == "boom"

    def test_logging_by_severity(self, handler, caplog):
        with caplog.at_level(logging.INFO, logger="carrier_modulator.error_handling"):
            handler.handle_error(InvalidDurationError("duration is negative", -1))
            handler.handle_error(RuntimeError("unexpected failure"))

        levels = {
            record.getMessage().split(": ", 1)[-1]: record.levelno for record in caplog.records
        }
        assert levels["duration is negative"] == logging.WARNING
        assert levels["unexpected failure"] == logging.ERROR

    def test_statistics(self, handler):
        handler.handle_error(InvalidBitStringError("a", "x"))
        handler.handle_error(InvalidBitStringError("b", "y"))
        handler.handle_error(RuntimeError("c"))

        stats = handler.get_error_statistics()
        assert stats["total_errors"] == 3
        assert stats["user_input_errors"] == 2
        assert stats["category_breakdown"] == {"invalid_bit_string": 2, "system_error": 1}
        assert stats["severity_breakdown"]["medium"] == 2

    def test_custom_strategy(self, handler):
        handler.register_suggestion_strategy(
            ErrorCategory.INVALID_DURATION,
            lambda error: {"suggestions": ["Try 0.01"], "diagnostic_data": {"custom": True}},
        )
        report = handler.handle_error(InvalidDurationError("bad", 0))

        assert report.suggestions == ["Try 0.01"]
        assert report.diagnostic_data == {"custom": True}

    def test_history_is_bounded(self, handler):
        handler.MAX_HISTORY = 10
        for i in range(11):
            handler.handle_error(InvalidDurationError(f"bad {i}", i))

        assert len(handler.error_history) == 5
        assert handler.error_history[-1].message == "bad 10"

    def test_diagnostic_report(self, handler):
        handler.handle_error(BitCountMismatchError("7 bits", 7, 2, 4))
        report = handler.generate_diagnostic_report()

        assert "CARRIER MODULATOR - ERROR DIAGNOSTIC REPORT" in report
        assert "Total Errors: 1" in report
        assert "bit_count_mismatch: 1" in report
        assert "Append 1 bit(s) or remove 1 bit(s)" in report

    def test_clear_error_history(self, handler):
        handler.handle_error(InvalidDurationError("bad", 0))
        handler.clear_error_history()

        assert handler.error_history == []
        assert handler.get_error_statistics()["total_errors"] == 0


class TestGlobalHelpers:
    """Test module-level helpers."""

    def test_global_handler_is_shared(self):
        assert get_error_handler() is get_error_handler()

    def test_handle_error_uses_global_handler(self):
        before = get_error_handler().get_error_statistics()["total_errors"]
        report = handle_error(InvalidDurationError("bad", 0))

        assert report.category == ErrorCategory.INVALID_DURATION
        assert get_error_handler().get_error_statistics()["total_errors"] == before + 1

    def test_create_error_context(self):
        context = create_error_context("modulate", "ModulationEngine", bits="0101")

        assert context.operation == "modulate"
        assert context.component == "ModulationEngine"
        assert context.parameters == {"bits": "0101"}
        assert "numpy_version" in context.system_info

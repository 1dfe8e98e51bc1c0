"""
Error handling system for the carrier modulation generator.

This module provides the user-input error taxonomy, centralized error
reporting with correction suggestions, and diagnostic summaries. Every error
raised here is a user-input error: it is reported synchronously, never
retried, and never fatal to the process.
"""

import logging
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import numpy as np

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification."""

    INVALID_BIT_STRING = "invalid_bit_string"
    INVALID_DURATION = "invalid_duration"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    BIT_COUNT_MISMATCH = "bit_count_mismatch"
    CONFIGURATION_ERROR = "configuration_error"
    VALIDATION_ERROR = "validation_error"
    SYSTEM_ERROR = "system_error"


@dataclass
class ErrorContext:
    """Context information for error handling."""

    operation: str
    component: str
    parameters: Dict[str, Any]
    timestamp: datetime
    system_info: Dict[str, Any]


@dataclass
class ErrorReport:
    """Error report handed back to the caller in place of a result."""

    error_id: str
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    user_message: str
    context: ErrorContext
    traceback_info: str
    suggestions: List[str] = field(default_factory=list)
    diagnostic_data: Dict[str, Any] = field(default_factory=dict)


class ModulationError(Exception):
    """Base exception class for modulation generator errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.SYSTEM_ERROR,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        user_message: Optional[str] = None,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.user_message = user_message or message
        self.context = context
        self.timestamp = datetime.now()


class InvalidBitStringError(ModulationError):
    """Bit input is empty, not binary, or longer than the configured limit."""

    def __init__(
        self,
        message: str,
        bits: Any = None,
        limit: Optional[int] = None,
        user_message: Optional[str] = None,
    ):
        super().__init__(
            message,
            ErrorCategory.INVALID_BIT_STRING,
            ErrorSeverity.MEDIUM,
            user_message=user_message or "Please enter a valid bit sequence (only 0 and 1).",
        )
        self.bits = bits
        self.limit = limit


class InvalidDurationError(ModulationError):
    """Symbol duration is not a positive finite number, or needs too many samples."""

    def __init__(
        self,
        message: str,
        value: Any = None,
        limit: Optional[int] = None,
        user_message: Optional[str] = None,
    ):
        super().__init__(
            message,
            ErrorCategory.INVALID_DURATION,
            ErrorSeverity.MEDIUM,
            user_message=user_message or "Please enter a valid symbol time (greater than 0).",
        )
        self.value = value
        self.limit = limit


class UnsupportedSchemeError(ModulationError):
    """Scheme selector matches no known modulation type."""

    def __init__(self, message: str, selector: Any = None):
        super().__init__(
            message,
            ErrorCategory.UNSUPPORTED_SCHEME,
            ErrorSeverity.MEDIUM,
            user_message="Unsupported modulation type.",
        )
        self.selector = selector


class BitCountMismatchError(ModulationError):
    """Bit count is not a multiple of the scheme's bits per symbol."""

    def __init__(self, message: str, bit_count: int = 0, bits_per_symbol: int = 1, order: int = 2):
        super().__init__(
            message,
            ErrorCategory.BIT_COUNT_MISMATCH,
            ErrorSeverity.MEDIUM,
            user_message=(
                f"The number of bits must be a multiple of {bits_per_symbol} for {order}-QAM."
            ),
        )
        self.bit_count = bit_count
        self.bits_per_symbol = bits_per_symbol
        self.order = order


class ErrorHandler:
    """Centralized error reporting for modulation requests.

    Errors are classified, logged at a level matching their severity, stored
    in a bounded history and enriched with correction suggestions from a
    per-category strategy registry.
    """

    MAX_HISTORY = 1000

    def __init__(self, log_level: int = logging.WARNING):
        """Initialize error handler.

        Args:
            log_level: Minimum log level for error reporting
        """
        self.log_level = log_level
        self.error_history: List[ErrorReport] = []
        self.suggestion_strategies: Dict[ErrorCategory, Callable] = {}
        self.statistics = {
            "total_errors": 0,
            "user_input_errors": 0,
            "critical_failures": 0,
        }

        self._register_default_strategies()

        logger.debug("ErrorHandler initialized")

    def _register_default_strategies(self) -> None:
        """Register default suggestion strategies for the user-input categories."""
        self.suggestion_strategies[ErrorCategory.INVALID_BIT_STRING] = self._bit_string_suggestions
        self.suggestion_strategies[ErrorCategory.INVALID_DURATION] = self._duration_suggestions
        self.suggestion_strategies[ErrorCategory.UNSUPPORTED_SCHEME] = self._scheme_suggestions
        self.suggestion_strategies[ErrorCategory.BIT_COUNT_MISMATCH] = self._bit_count_suggestions

    def handle_error(
        self, error: Exception, context: Optional[ErrorContext] = None
    ) -> ErrorReport:
        """Handle an error with reporting and correction suggestions.

        Args:
            error: Exception that occurred
            context: Context information about the error

        Returns:
            ErrorReport describing the failure
        """
        error_id = f"ERR_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{len(self.error_history):04d}"

        category, severity = self._classify_error(error)
        user_message = error.user_message if isinstance(error, ModulationError) else str(error)

        report = ErrorReport(
            error_id=error_id,
            category=category,
            severity=severity,
            message=str(error),
            user_message=user_message,
            context=context or self._create_default_context(),
            traceback_info=traceback.format_exc(),
        )

        self.statistics["total_errors"] += 1
        if isinstance(error, ModulationError):
            self.statistics["user_input_errors"] += 1
        if severity == ErrorSeverity.CRITICAL:
            self.statistics["critical_failures"] += 1

        strategy = self.suggestion_strategies.get(category)
        if strategy is not None:
            result = strategy(error)
            report.suggestions.extend(result.get("suggestions", []))
            report.diagnostic_data.update(result.get("diagnostic_data", {}))

        self._log_error(report)

        self.error_history.append(report)
        if len(self.error_history) > self.MAX_HISTORY:
            self.error_history = self.error_history[-(self.MAX_HISTORY // 2) :]

        return report

    def _classify_error(self, error: Exception) -> tuple[ErrorCategory, ErrorSeverity]:
        """Classify error by category and severity.

        Args:
            error: Exception to classify

        Returns:
            Tuple of (category, severity)
        """
        if isinstance(error, ModulationError):
            return error.category, error.severity

        error_str = str(error).lower()
        error_type = type(error).__name__.lower()

        if "configuration" in error_type or "config" in error_str:
            return ErrorCategory.CONFIGURATION_ERROR, ErrorSeverity.HIGH

        if "validation" in error_type:
            return ErrorCategory.VALIDATION_ERROR, ErrorSeverity.HIGH

        if error_type in ["systemexit", "keyboardinterrupt"]:
            return ErrorCategory.SYSTEM_ERROR, ErrorSeverity.CRITICAL

        return ErrorCategory.SYSTEM_ERROR, ErrorSeverity.HIGH

    def _create_default_context(self) -> ErrorContext:
        """Create default error context."""
        return ErrorContext(
            operation="unknown",
            component="unknown",
            parameters={},
            timestamp=datetime.now(),
            system_info=self._get_system_info(),
        )

    def _get_system_info(self) -> Dict[str, Any]:
        """Get system information for error context."""
        return {
            "python_version": sys.version,
            "platform": sys.platform,
            "numpy_version": np.__version__,
        }

    def _log_error(self, report: ErrorReport) -> None:
        """Log error report."""
        log_message = f"[{report.error_id}] {report.category.value.upper()}: {report.message}"

        if report.severity == ErrorSeverity.CRITICAL:
            logger.critical(log_message)
        elif report.severity == ErrorSeverity.HIGH:
            logger.error(log_message)
        elif report.severity == ErrorSeverity.MEDIUM:
            logger.warning(log_message)
        else:
            logger.info(log_message)

    def _bit_string_suggestions(self, error: Exception) -> Dict[str, Any]:
        limit = getattr(error, "limit", None)
        if limit is not None:
            return {
                "suggestions": [f"Send at most {limit} bits per request"],
                "diagnostic_data": {"max_bits": limit},
            }

        suggestions = ["Use only the characters '0' and '1'"]
        diagnostic_data = {}

        bits = getattr(error, "bits", None)
        if isinstance(bits, str):
            invalid = sorted(set(bits) - {"0", "1"})
            if not bits.strip():
                suggestions.append("Enter at least one bit")
            elif invalid:
                suggestions.append(f"Remove the characters: {', '.join(repr(c) for c in invalid)}")
            diagnostic_data["invalid_characters"] = invalid
            diagnostic_data["input_length"] = len(bits)

        return {"suggestions": suggestions, "diagnostic_data": diagnostic_data}

    def _duration_suggestions(self, error: Exception) -> Dict[str, Any]:
        limit = getattr(error, "limit", None)
        if limit is not None:
            return {
                "suggestions": ["Use a shorter symbol time or fewer bits"],
                "diagnostic_data": {
                    "received_value": repr(getattr(error, "value", None)),
                    "max_samples": limit,
                },
            }

        return {
            "suggestions": [
                "Enter the symbol time in seconds as a positive number, e.g. 0.01",
            ],
            "diagnostic_data": {"received_value": repr(getattr(error, "value", None))},
        }

    def _scheme_suggestions(self, error: Exception) -> Dict[str, Any]:
        from .models import ModulationScheme

        selectors = [scheme.selector for scheme in ModulationScheme]
        return {
            "suggestions": [f"Choose one of: {', '.join(selectors)}"],
            "diagnostic_data": {
                "received_selector": repr(getattr(error, "selector", None)),
                "supported_selectors": selectors,
            },
        }

    def _bit_count_suggestions(self, error: Exception) -> Dict[str, Any]:
        if not isinstance(error, BitCountMismatchError):
            return {}

        remainder = error.bit_count % error.bits_per_symbol
        missing = error.bits_per_symbol - remainder
        return {
            "suggestions": [
                f"Append {missing} bit(s) or remove {remainder} bit(s)",
            ],
            "diagnostic_data": {
                "bit_count": error.bit_count,
                "bits_per_symbol": error.bits_per_symbol,
                "order": error.order,
                "remainder": remainder,
            },
        }

    def register_suggestion_strategy(self, category: ErrorCategory, strategy: Callable) -> None:
        """Register a custom suggestion strategy.

        Args:
            category: Error category to handle
            strategy: Callable that takes the error and returns a dict with
                'suggestions' and 'diagnostic_data'
        """
        self.suggestion_strategies[category] = strategy
        logger.info(f"Registered custom suggestion strategy for {category.value}")

    def get_error_statistics(self) -> Dict[str, Any]:
        """Get error handling statistics."""
        stats = self.statistics.copy()

        category_counts = {}
        severity_counts = {}
        for report in self.error_history:
            category_counts[report.category.value] = (
                category_counts.get(report.category.value, 0) + 1
            )
            severity_counts[report.severity.value] = (
                severity_counts.get(report.severity.value, 0) + 1
            )

        stats["category_breakdown"] = category_counts
        stats["severity_breakdown"] = severity_counts

        return stats

    def generate_diagnostic_report(self, include_traceback: bool = False) -> str:
        """Generate a plain-text diagnostic report.

        Args:
            include_traceback: Include full traceback information

        Returns:
            Formatted diagnostic report
        """
        report = []
        report.append("=" * 80)
        report.append("CARRIER MODULATOR - ERROR DIAGNOSTIC REPORT")
        report.append("=" * 80)
        report.append(f"Generated: {datetime.now().isoformat()}")
        report.append("")

        stats = self.get_error_statistics()
        report.append("ERROR STATISTICS:")
        report.append(f"  Total Errors: {stats['total_errors']}")
        report.append(f"  User Input Errors: {stats['user_input_errors']}")
        report.append(f"  Critical Failures: {stats['critical_failures']}")
        report.append("")

        if stats["category_breakdown"]:
            report.append("ERROR CATEGORIES:")
            for category, count in stats["category_breakdown"].items():
                report.append(f"  {category}: {count}")
            report.append("")

        recent_errors = self.error_history[-10:]
        if recent_errors:
            report.append("RECENT ERRORS (last 10):")
            for error_report in recent_errors:
                report.append(
                    f"  [{error_report.error_id}] {error_report.category.value}: "
                    f"{error_report.message}"
                )
                for suggestion in error_report.suggestions:
                    report.append(f"    → {suggestion}")
                if include_traceback and error_report.traceback_info:
                    report.append(f"    Traceback: {error_report.traceback_info}")
            report.append("")

        system_info = self._get_system_info()
        report.append("SYSTEM INFORMATION:")
        report.append(f"  Python Version: {system_info['python_version']}")
        report.append(f"  Platform: {system_info['platform']}")
        report.append(f"  NumPy Version: {system_info['numpy_version']}")
        report.append("=" * 80)

        return "\n".join(report)

    def clear_error_history(self) -> None:
        """Clear error history and reset statistics."""
        self.error_history.clear()
        self.statistics = {
            "total_errors": 0,
            "user_input_errors": 0,
            "critical_failures": 0,
        }
        logger.info("Error history and statistics cleared")


# Global error handler instance
_global_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _global_error_handler
    if _global_error_handler is None:
        _global_error_handler = ErrorHandler()
    return _global_error_handler


def handle_error(error: Exception, context: Optional[ErrorContext] = None) -> ErrorReport:
    """Handle an error using the global error handler.

    Args:
        error: Exception that occurred
        context: Context information about the error

    Returns:
        ErrorReport with handling results
    """
    return get_error_handler().handle_error(error, context)


def create_error_context(operation: str, component: str, **parameters) -> ErrorContext:
    """Create error context for error handling.

    Args:
        operation: Name of the operation being performed
        component: Name of the component where error occurred
        **parameters: Additional parameters to include in context

    Returns:
        ErrorContext object
    """
    return ErrorContext(
        operation=operation,
        component=component,
        parameters=parameters,
        timestamp=datetime.now(),
        system_info=get_error_handler()._get_system_info(),
    )

from typing import Optional, List, Dict, Any, Union
import logging
import warnings
from enum import Enum, auto

logger = logging.getLogger(__name__)

# define error level
class ErrorLevel(Enum):
    CRITICAL = auto()  # return an exception for the caller to raise
    ERROR = auto()     # record as an error even though processing continues
    WARNING = auto()   # record as a warning

class ErrorCode(Enum):
    NOT_FOUND = "Not found error"
    VALIDATION = "Validation error"
    INVALID_INPUT = "Invalid input error"
    INVALID_QUANTUM_NUMBERS = "Invalid quantum numbers"
    SAMPLING_SHORTFALL = "Sampling shortfall"

class OrbitalWarning(UserWarning):
    """Base category for non-fatal conditions raised by the sampling core"""

class QuantumNumberWarning(OrbitalWarning):
    """(n, l, m) outside the allowed ranges; the evaluation returned zero"""

class SamplingShortfallWarning(OrbitalWarning):
    """The attempt budget ran out before the requested point count was reached"""

class ConfigurationWarning(OrbitalWarning):
    """A settings value was missing or invalid and a default was used"""

_warning_categories = {
    ErrorCode.INVALID_QUANTUM_NUMBERS: QuantumNumberWarning,
    ErrorCode.SAMPLING_SHORTFALL: SamplingShortfallWarning,
    ErrorCode.NOT_FOUND: ConfigurationWarning,
    ErrorCode.VALIDATION: ConfigurationWarning,
    ErrorCode.INVALID_INPUT: OrbitalWarning,
}

# base custom error class
class CustomError(Exception):
    """Base custom error class"""

    def __init__(self, message: str, error_code: ErrorCode, details: Optional[Dict[str, Any]] = None) -> None:
        self.message: str = message
        self.error_code: ErrorCode = error_code
        self.details: Dict[str, Any] = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Return error information in dictionary format"""
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details
        }

# anomalous error (exceptional error)
class CriticalError(CustomError):
    """Critical error that the system cannot continue"""
    pass

class ValidationError(CustomError):
    """Error when the input value fails to validate"""
    pass

class ErrorHandler:
    """
    Handler that manages errors and warnings

    Records accumulate until clear() is called. With max_records set, only the
    newest max_records errors and warnings are kept; older ones are dropped but
    still reach the log.
    """

    def __init__(self, max_records: Optional[int] = None) -> None:
        self.max_records: Optional[int] = max_records
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    def _record(self, records: List[Dict[str, Any]], error_info: Dict[str, Any]) -> None:
        records.append(error_info)
        if self.max_records is not None and len(records) > self.max_records:
            del records[:len(records) - self.max_records]

    def handle(self,
               message: str,
               error_code: ErrorCode,
               level: ErrorLevel,
               details: Optional[Dict[str, Any]] = None) -> Union[None, CustomError]:
        """
        Process errors based on the error level

        Args:
            message: error message
            error_code: error code
            level: error level
            details: additional details

        Returns:
            Returns a CustomError object if the level is CRITICAL, otherwise None
        """
        error_info = {
            "message": message,
            "error_code": error_code,
            "details": details or {}
        }

        if level == ErrorLevel.CRITICAL:
            if error_code == ErrorCode.VALIDATION:
                return ValidationError(message, error_code, details)
            else:
                return CriticalError(message, error_code, details)

        elif level == ErrorLevel.ERROR:
            self._record(self.errors, error_info)
            logger.error(f"[{error_code.value}] {message}")

        elif level == ErrorLevel.WARNING:
            self._record(self.warnings, error_info)
            logger.warning(f"[{error_code.value}] {message}")
            category = _warning_categories.get(error_code, OrbitalWarning)
            warnings.warn(f"[{error_code.value}] {message}", category, stacklevel=3)

        return None

    def has_errors(self) -> bool:
        """Check if errors are recorded"""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if warnings are recorded"""
        return len(self.warnings) > 0

    def get_all_issues(self) -> Dict[str, List[Dict[str, Any]]]:
        """Get all errors and warnings"""
        return {
            "errors": self.errors,
            "warnings": self.warnings
        }

    def clear(self) -> None:
        """Clear all errors and warnings"""
        self.errors = []
        self.warnings = []

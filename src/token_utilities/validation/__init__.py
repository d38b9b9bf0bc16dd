from token_utilities.validation.checks import ALL_CHECKS, CheckContext
from token_utilities.validation.diagnostic import Diagnostic, Severity
from token_utilities.validation.validator import validate_config

__all__ = ["ALL_CHECKS", "CheckContext", "Diagnostic", "Severity", "validate_config"]

"""
Argument checks shared by the façade setters.

Each check raises ValidationError and returns the (possibly normalised)
value, so setters can run every check before touching their configuration.
"""
import re
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from .config import (
    AGE_RANGE_REGEX,
    AUTHENTICATION_MODULES,
    CONTRACT_FORMATS,
    DOB_FORMAT,
    DOB_REGEX,
    HEX_COLOR_REGEX,
    OUTPUT_FORMATS,
    VIDEO_PASSCODE_REGEX,
)
from .errors import ValidationError
from .resources import is_valid_url

age_range_regex = re.compile(AGE_RANGE_REGEX)
dob_regex = re.compile(DOB_REGEX)
hex_color_regex = re.compile(HEX_COLOR_REGEX)
passcode_regex = re.compile(VIDEO_PASSCODE_REGEX)


def check_int_range(value: Any, low: int, high: int, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ValidationError(message)
    return value


def check_min_int(value: Any, low: int, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < low:
        raise ValidationError(message)
    return value


def check_threshold(value: Any, message: str, allow_zero: bool = False) -> float:
    """Threshold must be a number in (0, 1], or [0, 1] when allow_zero is set"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(message)
    lower_ok = value >= 0 if allow_zero else value > 0
    if not lower_ok or value > 1:
        raise ValidationError(message)
    return float(value)


def check_auth_module(module: str) -> str:
    if module not in AUTHENTICATION_MODULES:
        raise ValidationError('invalid authentication module; "1", "2" or "quick" accepted')
    return module


def check_output_format(output_format: str) -> str:
    if output_format not in OUTPUT_FORMATS:
        raise ValidationError('invalid output format; "url" or "base64" accepted')
    return output_format


def check_dob(dob: str) -> str:
    """Empty clears the check, otherwise a real calendar date in YYYY/MM/DD"""
    if not dob:
        return ""
    if not dob_regex.fullmatch(dob):
        raise ValidationError("invalid birthday format (YYYY/MM/DD)")
    try:
        datetime.strptime(dob, DOB_FORMAT)
    except ValueError:
        raise ValidationError("invalid birthday format (YYYY/MM/DD)") from None
    return dob


def check_age_range(age_range: str) -> str:
    if age_range and not age_range_regex.fullmatch(age_range):
        raise ValidationError("invalid age range format (minAge-maxAge)")
    return age_range


def check_hex_color(color: str, label: str) -> str:
    if not isinstance(color, str) or not hex_color_regex.fullmatch(color):
        raise ValidationError(f"invalid {label} color HEX code")
    return color


def check_passcode(passcode: str) -> str:
    if not passcode or not passcode_regex.match(passcode):
        raise ValidationError("please provide a 4 digit passcode for video biometric verification")
    return passcode


def check_url(url: str, label: str) -> str:
    """Empty or an absolute URL"""
    if url and not is_valid_url(url):
        raise ValidationError(f"invalid URL format for {label}")
    return url


def check_contract(
    template_id: str, output_format: str, prefill_data: Optional[Dict[str, Any]]
) -> Tuple[str, str, Dict[str, Any]]:
    if not template_id:
        raise ValidationError("invalid template ID")
    if output_format not in CONTRACT_FORMATS:
        raise ValidationError('invalid output file format; "PDF", "DOCX" or "HTML" accepted')
    if prefill_data is not None and not isinstance(prefill_data, dict):
        raise ValidationError("prefill data must be a mapping of field names to values")
    return template_id, output_format, dict(prefill_data or {})

import base64
import os
from enum import Enum
from typing import Dict
from urllib.parse import urlparse

from .config import INLINE_CONTENT_MIN_LENGTH
from .errors import ResourceClassificationError


class MediaKind(str, Enum):
    REMOTE_URL = "remote_url"
    LOCAL_FILE = "local_file"
    INLINE_ENCODED = "inline_encoded"


def is_valid_url(value: str) -> bool:
    """Check if string is an absolute URL with a scheme and a host"""
    try:
        result = urlparse(value)
    except ValueError:
        return False
    return bool(result.scheme and result.netloc)


def is_local_file(value: str) -> bool:
    """Check if string names an existing regular file"""
    try:
        return os.path.isfile(value)
    except (TypeError, ValueError):
        return False


def encode_file(file_path: str) -> str:
    """Read a file and return its bytes as base64 text"""
    with open(file_path, "rb") as f:
        return base64.b64encode(f.read()).decode("ascii")


def classify(value: str) -> MediaKind:
    """
    Decide how a media reference should be sent.

    URLs win over files, files win over inline content. Callers must handle
    "no value supplied" before calling this; the empty string never classifies.

    Raises:
        ResourceClassificationError: value is none of the three kinds
    """
    if is_valid_url(value):
        return MediaKind.REMOTE_URL
    if is_local_file(value):
        return MediaKind.LOCAL_FILE
    if len(value) > INLINE_CONTENT_MIN_LENGTH:
        return MediaKind.INLINE_ENCODED
    raise ResourceClassificationError("media reference is not a URL, an existing file, or encoded content")


def resolve_media(value: str, label: str, url_field: str, base64_field: str) -> Dict[str, str]:
    """
    Resolve a media reference into the single wire field it belongs in

    Args:
        value: URL, local file path, or base64 content
        label: human readable name used in error messages, e.g. "primary document image"
        url_field: wire key for remote URLs
        base64_field: wire key for encoded content

    Returns:
        Mapping with exactly one entry
    """
    try:
        kind = classify(value)
    except ResourceClassificationError:
        raise ResourceClassificationError(f"invalid {label}, file not found or malformed URL") from None

    if kind is MediaKind.REMOTE_URL:
        return {url_field: value}

    if kind is MediaKind.LOCAL_FILE:
        try:
            return {base64_field: encode_file(value)}
        except OSError as e:
            raise ResourceClassificationError(f"invalid {label}, unable to read file: {e}") from e

    return {base64_field: value}

import ipaddress
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Credentials
    API_KEY: str = ""

    # Endpoint selection
    DEFAULT_REGION: str = "US"
    US_API_BASE_URL: str = "https://api.example.com"
    EU_API_BASE_URL: str = "https://api-eu.example.com"

    # Stamped into every request as the "client" field
    CLIENT_ID: str = "python-sdk"

    # None leaves the requests default in place
    REQUEST_TIMEOUT: Optional[float] = None

    # Raise on undecodable response bodies instead of falling back to empty results
    STRICT_DECODE: bool = False

    # Private address detection for callback URLs: "stdlib" or "table"
    ADDRESS_POLICY: str = "stdlib"

    class Config:
        env_file = ".env"
        env_prefix = "IDVERIFY_"


settings = Settings()

# Strings longer than this that are neither URLs nor files are treated as pre-encoded content
INLINE_CONTENT_MIN_LENGTH = 100

# Enumerations
ACCURACY_RANGE = (0, 2)
AUTHENTICATION_MODULES = ("1", "2", "quick")
OUTPUT_FORMATS = ("url", "base64")
CONTRACT_FORMATS = ("PDF", "DOCX", "HTML")
FACE_VERIFICATION_TYPES = {"photo": 1, "video": 2}
AML_ENTITY_TYPES = ("", "person", "legalentity")
VAULT_IMAGE_TYPES = (0, 1)

# Numeric limits
OCR_SCALEDOWN_MIN = 500
OCR_SCALEDOWN_MAX = 4000
MAX_ATTEMPT_RANGE = (1, 10)
QR_DIMENSION_RANGE = (1, 50)
MAX_VAULT_CUSTOM_DATA = 5
MAX_VAULT_FILTERS = 5

# Patterns
AGE_RANGE_REGEX = r"^\d+-\d+$"
DOB_REGEX = r"^\d{4}/\d{2}/\d{2}$"
DOB_FORMAT = "%Y/%m/%d"
HEX_COLOR_REGEX = r"^[0-9A-Fa-f]{6}$"
VIDEO_PASSCODE_REGEX = r"^[0-9]{4}"

# Callback hosts must be reachable from the public network
PRIVATE_NETWORKS = tuple(
    ipaddress.ip_network(cidr)
    for cidr in (
        "127.0.0.0/8",     # IPv4 loopback
        "10.0.0.0/8",      # RFC1918
        "172.16.0.0/12",   # RFC1918
        "192.168.0.0/16",  # RFC1918
        "169.254.0.0/16",  # RFC3927 link-local
        "::1/128",         # IPv6 loopback
        "fe80::/10",       # IPv6 link-local
        "fc00::/7",        # IPv6 unique local
    )
)

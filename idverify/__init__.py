"""
Identity verification API client

Four façades over the remote service:
- CoreAPI: document scanning, face verification and screening
- DocuPassAPI: hosted verification and signature sessions
- VaultAPI: stored verification records
- AMLAPI: sanctions, PEP and criminal watchlist search
"""

import logging

from .aml import AMLAPI
from .core import CoreAPI
from .docupass import DocuPassAPI
from .errors import (
    ApplicationError,
    IDVerifyError,
    ResourceClassificationError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)
from .models import (
    AMLResponse,
    CoreDualSideResponse,
    CoreResponse,
    DocuPassIdentityCallback,
    DocuPassIdentityResponse,
    DocuPassSignatureCallback,
    DocuPassSignatureResponse,
    VaultRecord,
)
from .resources import MediaKind, classify
from .vault import VaultAPI

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AMLAPI",
    "CoreAPI",
    "DocuPassAPI",
    "VaultAPI",
    "IDVerifyError",
    "ValidationError",
    "ResourceClassificationError",
    "TransportError",
    "ResponseDecodeError",
    "ApplicationError",
    "AMLResponse",
    "CoreResponse",
    "CoreDualSideResponse",
    "DocuPassIdentityResponse",
    "DocuPassSignatureResponse",
    "DocuPassIdentityCallback",
    "DocuPassSignatureCallback",
    "VaultRecord",
    "MediaKind",
    "classify",
]

__version__ = "1.0.0"

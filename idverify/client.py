import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from .config import settings
from .errors import ValidationError
from .normalizer import ModelT, normalize
from .transport import endpoint_from_region, post_json

logger = logging.getLogger(__name__)


class BaseAPI:
    """
    Common plumbing for every façade: credential, endpoint, configuration
    lifecycle and the build -> send -> normalize round trip.
    """

    api_path = ""
    config_class: Optional[Type[BaseModel]] = None

    def __init__(self, api_key: Optional[str] = None, region: Optional[str] = None):
        api_key = api_key or settings.API_KEY
        if not api_key:
            raise ValidationError("please provide an API key")

        self.api_key = api_key
        self.api_endpoint = endpoint_from_region(region, self.api_path)
        if self.config_class is not None:
            self.config = self.config_class()

    def reset_config(self) -> None:
        """Restore every option to its default; credential and endpoint are kept"""
        if self.config_class is not None:
            self.config = self.config_class()

    def _url(self, action: str = "") -> str:
        if not action:
            return self.api_endpoint
        return f"{self.api_endpoint}/{action}"

    def _config_payload(self) -> Dict[str, Any]:
        if self.config_class is None:
            return {}
        return self.config.model_dump(by_alias=True)

    def _build_payload(self, *parts: Dict[str, Any]) -> Dict[str, Any]:
        """Merge payload parts in order, then stamp the credential and client id"""
        payload: Dict[str, Any] = {}
        for part in parts:
            payload.update(part)
        payload["apikey"] = self.api_key
        payload["client"] = settings.CLIENT_ID
        return payload

    def _call(self, action: str, payload: Dict[str, Any], model: Type[ModelT]) -> ModelT:
        logger.debug("%s calling %s", type(self).__name__, action or "/")
        body = post_json(self._url(action), payload)
        return normalize(model, body)

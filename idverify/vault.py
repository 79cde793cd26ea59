from typing import Any, Dict, List, Optional, Union

from .client import BaseAPI
from .config import MAX_VAULT_FILTERS, VAULT_IMAGE_TYPES
from .errors import ValidationError
from .models import (
    VaultFaceSearchResponse,
    VaultImageResponse,
    VaultItemResponse,
    VaultListResponse,
    VaultSuccessResponse,
    VaultTrainingStatusResponse,
)
from .resources import resolve_media
from .validators import check_min_int, check_threshold

DOCUMENT_IMAGE = 0
PERSON_IMAGE = 1


class VaultAPI(BaseAPI):
    """Stored verification records and their images"""

    api_path = "vault"

    def get(self, vault_id: str) -> VaultItemResponse:
        """Get a single vault entry"""
        self._require_id(vault_id)
        return self._call("get", self._build_payload({"id": vault_id}), VaultItemResponse)

    def list(
        self,
        filters: Optional[List[str]] = None,
        order_by: str = "createtime",
        sort: str = "DESC",
        limit: int = 10,
        offset: int = 0,
    ) -> VaultListResponse:
        """
        List vault entries with optional filtering, sorting and paging

        Args:
            filters: up to 5 statements such as "docupass_reference=XXXX"
            order_by: field to sort on
            sort: "ASC" or "DESC"
            limit: entries per page
            offset: entries to skip
        """
        filters = list(filters or [])
        if len(filters) > MAX_VAULT_FILTERS:
            raise ValidationError("filter should be a list containing maximum of 5 filter statements")
        if sort not in ("ASC", "DESC"):
            raise ValidationError('sort should be either "ASC" or "DESC"')
        limit = check_min_int(limit, 0, "limit should be a non-negative integer")
        offset = check_min_int(offset, 0, "offset should be a non-negative integer")

        payload = self._build_payload(
            {
                "filter": filters,
                "orderby": order_by,
                "sort": sort,
                "limit": limit,
                "offset": offset,
            }
        )
        return self._call("list", payload, VaultListResponse)

    def update(self, vault_id: str, fields: Dict[str, Any]) -> VaultSuccessResponse:
        """Update a vault entry; only the supplied fields change"""
        self._require_id(vault_id)
        data = dict(fields)
        data["id"] = vault_id
        return self._call("update", self._build_payload(data), VaultSuccessResponse)

    def delete(self, vault_id: Union[str, List[str]]) -> VaultSuccessResponse:
        """Delete one entry, or several when given a list of IDs"""
        if isinstance(vault_id, (list, tuple)):
            if not vault_id or not all(vault_id):
                raise ValidationError("vault entry ID required")
            vault_id = list(vault_id)
        else:
            self._require_id(vault_id)
        return self._call("delete", self._build_payload({"id": vault_id}), VaultSuccessResponse)

    def add_image(self, vault_id: str, image: str, image_type: int = DOCUMENT_IMAGE) -> VaultImageResponse:
        """Add a document (0) or person (1) image to an existing entry"""
        self._require_id(vault_id)
        if image_type not in VAULT_IMAGE_TYPES or isinstance(image_type, bool):
            raise ValidationError("invalid image type, 0 or 1 accepted")
        if not image:
            raise ValidationError("image required")

        payload = self._build_payload(
            {"id": vault_id, "type": image_type},
            resolve_media(image, "image", "imageurl", "image"),
        )
        return self._call("addimage", payload, VaultImageResponse)

    def delete_image(self, vault_id: str, image_id: str) -> VaultSuccessResponse:
        self._require_id(vault_id)
        if not image_id:
            raise ValidationError("image ID required")

        payload = self._build_payload({"id": vault_id, "imageid": image_id})
        return self._call("deleteimage", payload, VaultSuccessResponse)

    def search_face(self, image: str, max_entry: int = 10, threshold: float = 0.5) -> VaultFaceSearchResponse:
        """Find entries whose person image matches the given face"""
        if not image:
            raise ValidationError("image required")
        max_entry = check_min_int(max_entry, 1, "max entry should be a positive integer")
        threshold = check_threshold(threshold, "invalid threshold; please specify a number greater than 0 and up to 1")

        payload = self._build_payload(
            {"maxentry": max_entry, "threshold": threshold},
            resolve_media(image, "image", "imageurl", "image"),
        )
        return self._call("searchface", payload, VaultFaceSearchResponse)

    def train_face(self) -> VaultSuccessResponse:
        """Rebuild the face search index"""
        return self._call("train", self._build_payload(), VaultSuccessResponse)

    def training_status(self) -> VaultTrainingStatusResponse:
        return self._call("trainstatus", self._build_payload(), VaultTrainingStatusResponse)

    @staticmethod
    def _require_id(vault_id: str) -> None:
        if not vault_id:
            raise ValidationError("vault entry ID required")

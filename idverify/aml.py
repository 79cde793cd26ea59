from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .client import BaseAPI
from .config import AML_ENTITY_TYPES
from .errors import ValidationError
from .models import AMLResponse


class AMLConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    database: str = Field("", alias="database")
    entity: str = Field("", alias="entity")


class AMLAPI(BaseAPI):
    """Search sanctions, PEP and criminal watchlists by name or document number"""

    api_path = "aml"
    config_class = AMLConfig

    def set_aml_database(self, databases: str) -> None:
        """
        Source databases to search, comma separated (e.g. "un_sc,us_ofac").
        Leave empty to search every source.
        """
        self.config.database = databases

    def set_entity_type(self, entity_type: str) -> None:
        """Return only "person" or "legalentity" matches; empty returns both"""
        if entity_type not in AML_ENTITY_TYPES:
            raise ValidationError('entity type should be either empty, "person" or "legalentity"')
        self.config.entity = entity_type

    def search_by_name(self, name: str, country: str = "", dob: str = "") -> AMLResponse:
        """Search by a person's or company's name or alias"""
        if not name:
            raise ValidationError("name required")
        return self._search({"name": name, "country": country, "dob": dob})

    def search_by_id_number(self, document_number: str, country: str = "", dob: str = "") -> AMLResponse:
        """Search by passport, ID card or other identification document number"""
        if not document_number:
            raise ValidationError("document number required")
        return self._search({"documentnumber": document_number, "country": country, "dob": dob})

    def _search(self, query: Dict[str, Any]) -> AMLResponse:
        return self._call("", self._build_payload(self._config_payload(), query), AMLResponse)

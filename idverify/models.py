"""
Typed response models.

Every field is optional and defaults to None so that a field the service
left out is never confused with a real zero, false or empty value. Unknown
keys are ignored, except on VaultRecord which keeps them.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class APIModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class APIError(APIModel):
    code: Optional[int] = None
    message: Optional[str] = None


class APIResponse(APIModel):
    """Every response may carry an embedded error object"""
    error: Optional[APIError] = None


# ------------------------
# Shared identity payloads
# ------------------------
class IdentityData(APIModel):
    document_number: Optional[str] = Field(None, alias="documentNumber")
    personal_number: Optional[str] = Field(None, alias="personalNumber")
    first_name: Optional[str] = Field(None, alias="firstName")
    middle_name: Optional[str] = Field(None, alias="middleName")
    last_name: Optional[str] = Field(None, alias="lastName")
    full_name: Optional[str] = Field(None, alias="fullName")
    first_name_local: Optional[str] = Field(None, alias="firstName_local")
    middle_name_local: Optional[str] = Field(None, alias="middleName_local")
    last_name_local: Optional[str] = Field(None, alias="lastName_local")
    full_name_local: Optional[str] = Field(None, alias="fullName_local")
    dob: Optional[str] = None
    dob_day: Optional[int] = None
    dob_month: Optional[int] = None
    dob_year: Optional[int] = None
    expiry: Optional[str] = None
    expiry_day: Optional[int] = None
    expiry_month: Optional[int] = None
    expiry_year: Optional[int] = None
    issued: Optional[str] = None
    issued_day: Optional[int] = None
    issued_month: Optional[int] = None
    issued_year: Optional[int] = None
    days_to_expiry: Optional[int] = Field(None, alias="daysToExipry")
    days_from_issue: Optional[int] = Field(None, alias="daysFromIssue")
    age: Optional[int] = None
    sex: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    hair_color: Optional[str] = Field(None, alias="hairColor")
    eye_color: Optional[str] = Field(None, alias="eyeColor")
    address1: Optional[str] = None
    address2: Optional[str] = None
    postcode: Optional[str] = None
    place_of_birth: Optional[str] = Field(None, alias="placeOfBirth")
    document_side: Optional[str] = Field(None, alias="documentSide")
    document_type: Optional[str] = Field(None, alias="documentType")
    document_name: Optional[str] = Field(None, alias="documentName")
    issuer_org_region_full: Optional[str] = Field(None, alias="issuerOrg_region_full")
    issuer_org_region_abbr: Optional[str] = Field(None, alias="issuerOrg_region_abbr")
    issuer_org_full: Optional[str] = Field(None, alias="issuerOrg_full")
    issuer_org_iso2: Optional[str] = Field(None, alias="issuerOrg_iso2")
    issuer_org_iso3: Optional[str] = Field(None, alias="issuerOrg_iso3")
    nationality_full: Optional[str] = None
    nationality_iso2: Optional[str] = None
    nationality_iso3: Optional[str] = None
    vehicle_class: Optional[str] = Field(None, alias="vehicleClass")
    restrictions: Optional[str] = None
    endorsement: Optional[str] = None
    optional_data: Optional[str] = Field(None, alias="optionalData")
    optional_data2: Optional[str] = Field(None, alias="optionalData2")
    internal_id: Optional[str] = Field(None, alias="internalId")


class ConfidenceData(APIModel):
    """Per-field OCR confidence, keyed like IdentityData"""
    document_number: Optional[float] = Field(None, alias="documentNumber")
    personal_number: Optional[float] = Field(None, alias="personalNumber")
    first_name: Optional[float] = Field(None, alias="firstName")
    middle_name: Optional[float] = Field(None, alias="middleName")
    last_name: Optional[float] = Field(None, alias="lastName")
    full_name: Optional[float] = Field(None, alias="fullName")
    first_name_local: Optional[float] = Field(None, alias="firstName_local")
    middle_name_local: Optional[float] = Field(None, alias="middleName_local")
    last_name_local: Optional[float] = Field(None, alias="lastName_local")
    full_name_local: Optional[float] = Field(None, alias="fullName_local")
    dob: Optional[float] = None
    dob_day: Optional[float] = None
    dob_month: Optional[float] = None
    dob_year: Optional[float] = None
    expiry: Optional[float] = None
    expiry_day: Optional[float] = None
    expiry_month: Optional[float] = None
    expiry_year: Optional[float] = None
    issued: Optional[float] = None
    issued_day: Optional[float] = None
    issued_month: Optional[float] = None
    issued_year: Optional[float] = None
    days_to_expiry: Optional[float] = Field(None, alias="daysToExipry")
    days_from_issue: Optional[float] = Field(None, alias="daysFromIssue")
    age: Optional[float] = None
    sex: Optional[float] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    hair_color: Optional[float] = Field(None, alias="hairColor")
    eye_color: Optional[float] = Field(None, alias="eyeColor")
    address1: Optional[float] = None
    address2: Optional[float] = None
    postcode: Optional[float] = None
    place_of_birth: Optional[float] = Field(None, alias="placeOfBirth")
    document_side: Optional[float] = Field(None, alias="documentSide")
    document_type: Optional[float] = Field(None, alias="documentType")
    document_name: Optional[float] = Field(None, alias="documentName")
    issuer_org_region_full: Optional[float] = Field(None, alias="issuerOrg_region_full")
    issuer_org_region_abbr: Optional[float] = Field(None, alias="issuerOrg_region_abbr")
    issuer_org_full: Optional[float] = Field(None, alias="issuerOrg_full")
    issuer_org_iso2: Optional[float] = Field(None, alias="issuerOrg_iso2")
    issuer_org_iso3: Optional[float] = Field(None, alias="issuerOrg_iso3")
    nationality_full: Optional[float] = None
    nationality_iso2: Optional[float] = None
    nationality_iso3: Optional[float] = None
    vehicle_class: Optional[float] = Field(None, alias="vehicleClass")
    restrictions: Optional[float] = None
    endorsement: Optional[float] = None
    optional_data: Optional[float] = Field(None, alias="optionalData")
    optional_data2: Optional[float] = Field(None, alias="optionalData2")
    internal_id: Optional[float] = Field(None, alias="internalId")


class ContractData(APIModel):
    document_url: Optional[str] = None
    error: Optional[str] = None


class FaceData(APIModel):
    is_identical: Optional[bool] = Field(None, alias="isIdentical")
    confidence: Optional[float] = None
    error: Optional[int] = None
    error_message: Optional[str] = None


class VerificationResult(APIModel):
    checkdigit: Optional[bool] = None
    face: Optional[bool] = None
    notexpired: Optional[bool] = None
    document_number: Optional[bool] = Field(None, alias="documentNumber")
    name: Optional[bool] = None
    age: Optional[bool] = None
    dob: Optional[bool] = None
    address: Optional[bool] = None
    postcode: Optional[bool] = None
    cccode: Optional[bool] = None


class VerificationData(APIModel):
    passed: Optional[bool] = None
    result: Optional[VerificationResult] = None


class AuthenticationSection(APIModel):
    passed: Optional[bool] = None
    code: Optional[int] = None
    reason: Optional[str] = None
    severity: Optional[str] = None


class AuthenticationBreakdown(APIModel):
    data_visibility: Optional[AuthenticationSection] = None
    image_quality: Optional[AuthenticationSection] = None
    feature_referencing: Optional[AuthenticationSection] = None
    exif_check: Optional[AuthenticationSection] = None
    publicity_check: Optional[AuthenticationSection] = None
    text_analysis: Optional[AuthenticationSection] = None
    biometric_analysis: Optional[AuthenticationSection] = None
    security_feature_check: Optional[AuthenticationSection] = None
    recapture_check: Optional[AuthenticationSection] = None


class AuthenticationData(APIModel):
    score: Optional[float] = None
    breakdown: Optional[AuthenticationBreakdown] = None
    warning: Optional[List[str]] = None


# ------------------------
# Watchlist (AML)
# ------------------------
class AMLDocumentNumber(APIModel):
    id: Optional[str] = None
    id_formatted: Optional[str] = None
    country: Optional[str] = None
    type: Optional[str] = None
    summary: Optional[str] = None


class AMLItem(APIModel):
    entity: Optional[str] = None
    fullname: Optional[List[str]] = None
    firstname: Optional[List[str]] = None
    middlename: Optional[List[str]] = None
    lastname: Optional[List[str]] = None
    alias: Optional[List[str]] = None
    dob: Optional[List[str]] = None
    address: Optional[List[str]] = None
    nationality: Optional[List[str]] = None
    birthplace: Optional[List[str]] = None
    gender: Optional[List[str]] = None
    documentnumber: Optional[List[AMLDocumentNumber]] = None
    program: Optional[List[str]] = None
    note: Optional[List[str]] = None
    status: Optional[List[str]] = None
    time: Optional[str] = None
    source: Optional[List[str]] = None
    database: Optional[str] = None


class AMLResponse(APIResponse):
    items: Optional[List[AMLItem]] = None


# ------------------------
# Document scan (Core)
# ------------------------
class CoreResponse(APIResponse):
    result: Optional[IdentityData] = None
    confidence: Optional[ConfidenceData] = None
    face: Optional[FaceData] = None
    verification: Optional[VerificationData] = None
    authentication: Optional[AuthenticationData] = None
    aml: Optional[AMLResponse] = None
    contract: Optional[ContractData] = None
    vault_id: Optional[str] = Field(None, alias="vaultid")
    match_rate: Optional[float] = Field(None, alias="matchrate")
    output: Optional[str] = None
    output_face: Optional[str] = Field(None, alias="outputface")
    cropped: Optional[str] = None
    cropped_face: Optional[str] = Field(None, alias="croppedface")
    execution_time: Optional[float] = Field(None, alias="executionTime")
    response_id: Optional[str] = Field(None, alias="responseID")
    quota: Optional[int] = None
    credit: Optional[int] = None

    @field_validator("aml", mode="before")
    @classmethod
    def wrap_aml_items(cls, value: Any) -> Any:
        # The scan endpoint may return the matched entities as a bare list
        if isinstance(value, list):
            return {"items": value}
        return value


class CoreDualSideResponse(CoreResponse):
    """Dual-side scans return one output/cropped image per side"""
    output: Optional[Union[List[str], str]] = None
    cropped: Optional[Union[List[str], str]] = None


# ------------------------
# Hosted sessions (DocuPass)
# ------------------------
class DocuPassIdentityResponse(APIResponse):
    reference: Optional[str] = None
    type: Optional[int] = None
    customid: Optional[str] = None
    url: Optional[str] = None
    qrcode: Optional[str] = None
    base_url: Optional[str] = None
    html: Optional[str] = None
    smssent: Optional[str] = None
    expiry: Optional[str] = None


class DocuPassSignatureResponse(APIResponse):
    reference: Optional[str] = None
    customid: Optional[str] = None
    url: Optional[str] = None
    qrcode: Optional[str] = None
    base_url: Optional[str] = None
    html_qrcode: Optional[str] = None
    html_iframe: Optional[str] = None
    smssent: Optional[str] = None
    expiry: Optional[str] = None


class DocuPassValidationResponse(APIResponse):
    success: Optional[bool] = None
    reference: Optional[str] = None


class CallbackPhone(APIModel):
    number: Optional[str] = None
    type: Optional[str] = None


class CallbackImage(APIModel):
    side: Optional[str] = None
    type: Optional[str] = None
    content: Optional[str] = None


class DocuPassIdentityCallback(APIModel):
    """Body the service POSTs to the registered callback URL after an identity session"""
    success: Optional[bool] = None
    reference: Optional[str] = None
    hash: Optional[str] = None
    customid: Optional[str] = None
    failreason: Optional[str] = None
    failcode: Optional[str] = None
    data: Optional[IdentityData] = None
    contract: Optional[ContractData] = None
    phone: Optional[CallbackPhone] = None
    face: Optional[FaceData] = None
    verification: Optional[VerificationData] = None
    authentication: Optional[AuthenticationData] = None
    aml: Optional[List[AMLItem]] = None
    documentimage: Optional[List[CallbackImage]] = None
    faceimage: Optional[List[CallbackImage]] = None
    vault_id: Optional[str] = Field(None, alias="vaultid")


class DocuPassSignatureCallback(APIModel):
    """Body the service POSTs to the registered callback URL after a signature session"""
    success: Optional[bool] = None
    reference: Optional[str] = None
    hash: Optional[str] = None
    customid: Optional[str] = None
    failreason: Optional[str] = None
    failcode: Optional[str] = None
    contract: Optional[ContractData] = None


# ------------------------
# Vault
# ------------------------
class VaultImage(APIModel):
    id: Optional[str] = None
    type: Optional[str] = None
    hash: Optional[str] = None
    url: Optional[str] = None
    createtime: Optional[str] = None


class VaultRecord(BaseModel):
    """
    A vault entry. Only the identifier and images are modelled; every other
    attribute is kept as-is so new server-side fields survive decoding.
    """
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    image: Optional[List[VaultImage]] = None

    @property
    def fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)


class VaultItemResponse(APIResponse):
    success: Optional[bool] = None
    data: Optional[VaultRecord] = None


class VaultListResponse(APIResponse):
    limit: Optional[int] = None
    offset: Optional[int] = None
    nextoffset: Optional[int] = None
    total: Optional[int] = None
    items: Optional[List[VaultRecord]] = None


class VaultSuccessResponse(APIResponse):
    success: Optional[bool] = None


class VaultImageResponse(APIResponse):
    success: Optional[bool] = None
    image: Optional[VaultImage] = None


class VaultFaceSearchResponse(APIResponse):
    items: Optional[List[VaultRecord]] = None


class VaultTrainingStatusResponse(APIResponse):
    status: Optional[str] = None
    start_time: Optional[str] = Field(None, alias="startTime")
    status_change_time: Optional[str] = Field(None, alias="statusChangeTime")
    last_success_time: Optional[str] = Field(None, alias="lastSuccessTime")

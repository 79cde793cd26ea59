from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .client import BaseAPI
from .config import (
    ACCURACY_RANGE,
    MAX_VAULT_CUSTOM_DATA,
    OCR_SCALEDOWN_MAX,
    OCR_SCALEDOWN_MIN,
)
from .errors import ValidationError
from .models import CoreDualSideResponse, CoreResponse
from .resources import resolve_media
from .validators import (
    check_age_range,
    check_auth_module,
    check_contract,
    check_dob,
    check_int_range,
    check_output_format,
    check_passcode,
    check_threshold,
)


class CoreConfig(BaseModel):
    """Document scan options; aliases are the wire keys"""
    model_config = ConfigDict(populate_by_name=True)

    accuracy: int = Field(2, alias="accuracy")
    authenticate: bool = Field(False, alias="authenticate")
    authenticate_module: str = Field("1", alias="authenticate_module")
    ocr_scaledown: int = Field(2000, alias="ocr_scaledown")
    output_image: bool = Field(False, alias="outputimage")
    output_face: bool = Field(False, alias="outputface")
    output_mode: str = Field("url", alias="outputmode")
    dual_side_check: bool = Field(False, alias="dualsidecheck")
    verify_expiry: bool = Field(True, alias="verify_expiry")
    verify_document_no: str = Field("", alias="verify_documentno")
    verify_name: str = Field("", alias="verify_name")
    verify_dob: str = Field("", alias="verify_dob")
    verify_age: str = Field("", alias="verify_age")
    verify_address: str = Field("", alias="verify_address")
    verify_postcode: str = Field("", alias="verify_postcode")
    country: str = Field("", alias="country")
    region: str = Field("", alias="region")
    doc_type: str = Field("", alias="type")
    check_blocklist: bool = Field(False, alias="checkblocklist")
    vault_save: bool = Field(True, alias="vault_save")
    vault_save_unrecognized: bool = Field(False, alias="vault_saveunrecognized")
    vault_no_duplicate: bool = Field(False, alias="vault_noduplicate")
    vault_auto_merge: bool = Field(False, alias="vault_automerge")
    vault_custom_data1: str = Field("", alias="vault_customdata1")
    vault_custom_data2: str = Field("", alias="vault_customdata2")
    vault_custom_data3: str = Field("", alias="vault_customdata3")
    vault_custom_data4: str = Field("", alias="vault_customdata4")
    vault_custom_data5: str = Field("", alias="vault_customdata5")
    barcode_mode: bool = Field(False, alias="barcodemode")
    biometric_threshold: float = Field(0.4, alias="biometric_threshold")
    aml_check: bool = Field(False, alias="aml_check")
    aml_strict_match: bool = Field(False, alias="aml_strict_match")
    aml_database: str = Field("", alias="aml_database")
    contract_generate: str = Field("", alias="contract_generate")
    contract_format: str = Field("", alias="contract_format")
    contract_prefill_data: Dict[str, Any] = Field(default_factory=dict, alias="contract_prefill_data")


class CoreAPI(BaseAPI):
    """
    Document scanning: OCR, authentication, face verification, AML screening,
    vault storage and contract generation in a single request.
    """

    api_path = ""
    config_class = CoreConfig

    # ------------------------
    # Setters
    # ------------------------
    def set_accuracy(self, accuracy: int) -> None:
        """OCR accuracy: 0 = fast, 1 = balanced, 2 = accurate (default)"""
        self.config.accuracy = check_int_range(accuracy, *ACCURACY_RANGE, "invalid accuracy; 0, 1 or 2 accepted")

    def enable_authentication(self, enabled: bool = True, module: str = "2") -> None:
        """Check whether the document is authentic; module is "1", "2" or "quick" """
        module = check_auth_module(module)
        self.config.authenticate = bool(enabled)
        self.config.authenticate_module = module

    def set_ocr_image_resize(self, max_scale: int) -> None:
        """
        Scale large images down before OCR to tune accuracy.
        0 disables resizing, otherwise 500 to 4000.
        """
        if isinstance(max_scale, bool) or not isinstance(max_scale, int) or (
            max_scale != 0 and not OCR_SCALEDOWN_MIN <= max_scale <= OCR_SCALEDOWN_MAX
        ):
            raise ValidationError("invalid scale value; 0, or 500 to 4000 accepted")
        self.config.ocr_scaledown = max_scale

    def set_biometric_threshold(self, threshold: float) -> None:
        """Minimum confidence for faces to count as identical; higher is stricter"""
        self.config.biometric_threshold = check_threshold(
            threshold, "invalid threshold value; number greater than 0 and up to 1 accepted"
        )

    def enable_image_output(self, crop_document: bool, crop_face: bool, output_format: str = "url") -> None:
        """Return cropped document and/or face images as URLs or base64"""
        output_format = check_output_format(output_format)
        self.config.output_image = bool(crop_document)
        self.config.output_face = bool(crop_face)
        self.config.output_mode = output_format

    def enable_dual_side_check(self, enabled: bool = True) -> None:
        """Cross-check names, document number and type between both sides (error 14 on mismatch)"""
        self.config.dual_side_check = bool(enabled)

    def verify_expiry(self, enabled: bool = True) -> None:
        self.config.verify_expiry = bool(enabled)

    def verify_document_number(self, document_number: str) -> None:
        self.config.verify_document_no = document_number

    def verify_name(self, name: str) -> None:
        self.config.verify_name = name

    def verify_dob(self, dob: str) -> None:
        """Date of birth in YYYY/MM/DD; empty string disables the check"""
        self.config.verify_dob = check_dob(dob)

    def verify_age(self, age_range: str) -> None:
        """Age range like "18-99"; empty string disables the check"""
        self.config.verify_age = check_age_range(age_range)

    def verify_address(self, address: str) -> None:
        self.config.verify_address = address

    def verify_postcode(self, postcode: str) -> None:
        self.config.verify_postcode = postcode

    def restrict_country(self, country_codes: str) -> None:
        """Comma separated ISO codes, e.g. "US,CA" (error 10 otherwise)"""
        self.config.country = country_codes

    def restrict_state(self, states: str) -> None:
        """Comma separated states, e.g. "CA,TX" (error 11 otherwise)"""
        self.config.region = states

    def restrict_type(self, document_types: str) -> None:
        """Document type letters, e.g. "PD" for passport and driver license (error 12 otherwise)"""
        self.config.doc_type = document_types

    def enable_blocklist_check(self, enabled: bool = True) -> None:
        self.config.check_blocklist = bool(enabled)

    def enable_barcode_mode(self, enabled: bool = True) -> None:
        """Skip visual OCR and read AAMVA barcodes only"""
        self.config.barcode_mode = bool(enabled)

    def enable_aml_check(self, enabled: bool = True) -> None:
        self.config.aml_check = bool(enabled)

    def set_aml_database(self, databases: str) -> None:
        """Comma separated source codes, e.g. "un_sc,us_ofac"; empty checks all sources"""
        self.config.aml_database = databases

    def enable_aml_strict_match(self, enabled: bool = True) -> None:
        self.config.aml_strict_match = bool(enabled)

    def enable_vault(
        self,
        enabled: bool = True,
        save_unrecognized: bool = False,
        no_duplicate_image: bool = False,
        auto_merge_document: bool = False,
    ) -> None:
        self.config.vault_save = bool(enabled)
        self.config.vault_save_unrecognized = bool(save_unrecognized)
        self.config.vault_no_duplicate = bool(no_duplicate_image)
        self.config.vault_auto_merge = bool(auto_merge_document)

    def set_vault_data(self, *data: str) -> None:
        """Attach up to 5 custom strings to the vault entry; missing slots are cleared"""
        if len(data) > MAX_VAULT_CUSTOM_DATA:
            raise ValidationError("up to 5 custom data strings accepted")
        values = list(data) + [""] * (MAX_VAULT_CUSTOM_DATA - len(data))
        for index, value in enumerate(values, start=1):
            setattr(self.config, f"vault_custom_data{index}", value)

    def generate_contract(
        self, template_id: str, output_format: str = "PDF", prefill_data: Optional[Dict[str, Any]] = None
    ) -> None:
        """Generate a legal document from the scanned ID using a portal template"""
        template_id, output_format, prefill_data = check_contract(template_id, output_format, prefill_data)
        self.config.contract_generate = template_id
        self.config.contract_format = output_format
        self.config.contract_prefill_data = prefill_data

    # ------------------------
    # Actions
    # ------------------------
    def scan(
        self,
        document_primary: str,
        face_photo: str = "",
        face_video: str = "",
        passcode: str = "",
    ) -> CoreResponse:
        """
        Scan the front of an ID document, optionally with a face photo or video

        Args:
            document_primary: URL, file path or base64 content of the document
            face_photo: optional selfie to compare against the document photo
            face_video: optional selfie video; requires passcode
            passcode: 4 digits the user reads out in the video
        """
        payload = self._build_scan_payload(document_primary, "", face_photo, face_video, passcode)
        return self._call("", payload, CoreResponse)

    def scan_both(
        self,
        document_primary: str,
        document_secondary: str,
        face_photo: str = "",
        face_video: str = "",
        passcode: str = "",
    ) -> CoreDualSideResponse:
        """Scan both sides of an ID document"""
        if not document_secondary:
            raise ValidationError("secondary document image required")

        payload = self._build_scan_payload(document_primary, document_secondary, face_photo, face_video, passcode)
        return self._call("", payload, CoreDualSideResponse)

    def _build_scan_payload(
        self,
        document_primary: str,
        document_secondary: str,
        face_photo: str,
        face_video: str,
        passcode: str,
    ) -> Dict[str, Any]:
        if not document_primary:
            raise ValidationError("primary document image required")

        media = [resolve_media(document_primary, "primary document image", "url", "file_base64")]

        if document_secondary:
            media.append(resolve_media(document_secondary, "secondary document image", "url_back", "file_back_base64"))

        if face_photo:
            media.append(resolve_media(face_photo, "face image", "faceurl", "face_base64"))

        if face_video:
            media.append(resolve_media(face_video, "face video", "videourl", "video_base64"))
            media.append({"passcode": check_passcode(passcode)})

        return self._build_payload(self._config_payload(), *media)

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .client import BaseAPI
from .config import FACE_VERIFICATION_TYPES, MAX_ATTEMPT_RANGE, QR_DIMENSION_RANGE
from .errors import ValidationError
from .models import (
    DocuPassIdentityResponse,
    DocuPassSignatureResponse,
    DocuPassValidationResponse,
)
from .network import AddressPolicy, get_address_policy, validate_callback_url
from .validators import (
    check_age_range,
    check_auth_module,
    check_contract,
    check_dob,
    check_hex_color,
    check_int_range,
    check_output_format,
    check_threshold,
    check_url,
)

# Session types understood by the create endpoint
IFRAME = 0
MOBILE = 1
REDIRECTION = 2
LIVE_MOBILE = 3


class DocuPassConfig(BaseModel):
    """Hosted session options; aliases are the wire keys"""
    model_config = ConfigDict(populate_by_name=True)

    aml_check: bool = Field(False, alias="aml_check")
    aml_database: str = Field("", alias="aml_database")
    aml_strict_match: bool = Field(False, alias="aml_strict_match")
    authenticate_min_score: float = Field(0, alias="authenticate_minscore")
    authenticate_module: str = Field("2", alias="authenticate_module")
    biometric: int = Field(0, alias="biometric")
    biometric_threshold: float = Field(0.4, alias="biometric_threshold")
    callback_url: str = Field("", alias="callbackurl")
    contract_format: str = Field("", alias="contract_format")
    contract_generate: str = Field("", alias="contract_generate")
    contract_prefill_data: Dict[str, Any] = Field(default_factory=dict, alias="contract_prefill_data")
    contract_sign: str = Field("", alias="contract_sign")
    crop_document: bool = Field(False, alias="crop_document")
    custom_html_url: str = Field("", alias="customhtmlurl")
    custom_id: str = Field("", alias="customid")
    document_country: str = Field("", alias="documentcountry")
    document_region: str = Field("", alias="documentregion")
    document_type: str = Field("", alias="documenttype")
    dual_side_check: bool = Field(False, alias="dualsidecheck")
    fail_redir: str = Field("", alias="failredir")
    language: str = Field("", alias="language")
    logo: str = Field("", alias="logo")
    max_attempt: int = Field(1, alias="maxattempt")
    no_branding: bool = Field(False, alias="nobranding")
    phone_verification: bool = Field(False, alias="phoneverification")
    qr_bg_color: str = Field("", alias="qr_bgcolor")
    qr_color: str = Field("", alias="qr_color")
    qr_margin: int = Field(1, alias="qr_margin")
    qr_size: int = Field(5, alias="qr_size")
    return_document_image: bool = Field(True, alias="return_documentimage")
    return_face_image: bool = Field(True, alias="return_faceimage")
    return_type: int = Field(1, alias="return_type")
    reusable: bool = Field(False, alias="reusable")
    sms_contract_link: str = Field("", alias="sms_contract_link")
    sms_verification_link: str = Field("", alias="sms_verification_link")
    success_redir: str = Field("", alias="successredir")
    vault_save: bool = Field(True, alias="vault_save")
    verify_address: str = Field("", alias="verify_address")
    verify_age: str = Field("", alias="verify_age")
    verify_dob: str = Field("", alias="verify_dob")
    verify_document_no: str = Field("", alias="verify_documentno")
    verify_expiry: bool = Field(False, alias="verify_expiry")
    verify_name: str = Field("", alias="verify_name")
    verify_phone: str = Field("", alias="verify_phone")
    verify_postcode: str = Field("", alias="verify_postcode")
    welcome_message: str = Field("", alias="welcomemessage")


class DocuPassAPI(BaseAPI):
    """
    Hosted identity verification and signature sessions.

    The service runs the verification UI itself; this class configures a
    session, hands back the link to send the user to, and confirms callback
    authenticity against the service.
    """

    api_path = "docupass"
    config_class = DocuPassConfig

    def __init__(
        self,
        api_key: Optional[str] = None,
        company_name: str = "",
        region: Optional[str] = None,
        address_policy: Optional[AddressPolicy] = None,
    ):
        super().__init__(api_key, region)
        if not company_name:
            raise ValidationError("please provide your company name")
        self.company_name = company_name
        self.address_policy = address_policy or get_address_policy()

    # ------------------------
    # Session behaviour
    # ------------------------
    def set_max_attempt(self, max_attempt: int) -> None:
        """Verification attempts allowed per user, 1 to 10"""
        self.config.max_attempt = check_int_range(
            max_attempt, *MAX_ATTEMPT_RANGE, "invalid max attempt, please specify integer between 1 to 10"
        )

    def set_custom_id(self, custom_id: str) -> None:
        """
        Custom string sent back to the callback URL and appended to redirection
        URLs; useful for identifying the user in your own database.
        """
        self.config.custom_id = custom_id

    def set_welcome_message(self, message: str) -> None:
        self.config.welcome_message = message

    def set_logo(self, url: str) -> None:
        self.config.logo = url

    def hide_branding_logo(self, hide: bool = True) -> None:
        self.config.no_branding = bool(hide)

    def set_custom_html(self, url: str) -> None:
        """Replace the session page with your own HTML/CSS template"""
        self.config.custom_html_url = url

    def set_language(self, language: str) -> None:
        """Override the language detected from the user's device"""
        self.config.language = language

    def set_callback_url(self, url: str) -> None:
        """
        Server-side URL that receives verification results.

        The service must reach it over the public network, so loopback,
        link-local and private addresses are refused. Empty string clears it.
        """
        if url:
            validate_callback_url(url, self.address_policy)
        self.config.callback_url = url

    def set_redirect_url(self, success_url: str = "", fail_url: str = "") -> None:
        """Redirect the browser after verification; reference and customid are appended"""
        success_url = check_url(success_url, "success URL")
        fail_url = check_url(fail_url, "fail URL")
        self.config.success_redir = success_url
        self.config.fail_redir = fail_url

    def set_reusable(self, enabled: bool = True) -> None:
        """Let many users verify through the same link, each with a fresh reference"""
        self.config.reusable = bool(enabled)

    def set_callback_image(self, send_document: bool, send_face: bool, output_format: str = "url") -> None:
        """Choose which uploaded images the callback carries, and as URLs or base64"""
        output_format = check_output_format(output_format)
        self.config.return_document_image = bool(send_document)
        self.config.return_face_image = bool(send_face)
        self.config.return_type = 0 if output_format == "base64" else 1

    def set_qr_code_format(
        self, foreground: str = "000000", background: str = "FFFFFF", size: int = 5, margin: int = 1
    ) -> None:
        """QR code styling for mobile sessions; colors are 6 digit hex codes"""
        foreground = check_hex_color(foreground, "foreground")
        background = check_hex_color(background, "background")
        size = check_int_range(size, *QR_DIMENSION_RANGE, "invalid image size; must be between 1 and 50")
        margin = check_int_range(margin, *QR_DIMENSION_RANGE, "invalid margin; must be between 1 and 50")
        self.config.qr_color = foreground
        self.config.qr_bg_color = background
        self.config.qr_size = size
        self.config.qr_margin = margin

    def enable_document_crop(self, enabled: bool = True) -> None:
        self.config.crop_document = bool(enabled)

    # ------------------------
    # Verification options
    # ------------------------
    def enable_authentication(self, enabled: bool = True, module: str = "2", min_score: float = 0.3) -> None:
        """Reject documents that score below min_score on authenticity checks"""
        if not enabled:
            self.config.authenticate_min_score = 0
            return

        min_score = check_threshold(
            min_score, "invalid minimum score; please specify float between 0 to 1", allow_zero=True
        )
        module = check_auth_module(module)
        self.config.authenticate_module = module
        self.config.authenticate_min_score = min_score

    def enable_face_verification(
        self, enabled: bool = True, verification_type: str = "photo", threshold: float = 0.4
    ) -> None:
        """Require a selfie photo or video, matched against the document at threshold"""
        if not enabled:
            self.config.biometric = 0
            return

        if verification_type not in FACE_VERIFICATION_TYPES:
            raise ValidationError('invalid verification type; "photo" or "video" accepted')
        threshold = check_threshold(
            threshold, "invalid threshold; please specify a number greater than 0 and up to 1"
        )
        self.config.biometric = FACE_VERIFICATION_TYPES[verification_type]
        self.config.biometric_threshold = threshold

    def enable_dual_side_check(self, enabled: bool = True) -> None:
        self.config.dual_side_check = bool(enabled)

    def enable_aml_check(self, enabled: bool = True) -> None:
        self.config.aml_check = bool(enabled)

    def set_aml_database(self, databases: str) -> None:
        self.config.aml_database = databases

    def enable_aml_strict_match(self, enabled: bool = True) -> None:
        self.config.aml_strict_match = bool(enabled)

    def enable_phone_verification(self, enabled: bool = True) -> None:
        """Ask the user for a phone number to verify; it is returned in the callback"""
        self.config.phone_verification = bool(enabled)

    def sms_verification_link(self, number: str) -> None:
        """Text the verification link to this number (charged per SMS)"""
        self.config.sms_verification_link = number

    def sms_contract_link(self, number: str) -> None:
        self.config.sms_contract_link = number

    def verify_phone(self, number: str) -> None:
        """Verify this number; the user cannot change it"""
        self.config.verify_phone = number

    def verify_expiry(self, enabled: bool = True) -> None:
        self.config.verify_expiry = bool(enabled)

    def verify_document_number(self, document_number: str) -> None:
        self.config.verify_document_no = document_number

    def verify_name(self, name: str) -> None:
        self.config.verify_name = name

    def verify_dob(self, dob: str) -> None:
        self.config.verify_dob = check_dob(dob)

    def verify_age(self, age_range: str) -> None:
        self.config.verify_age = check_age_range(age_range)

    def verify_address(self, address: str) -> None:
        self.config.verify_address = address

    def verify_postcode(self, postcode: str) -> None:
        self.config.verify_postcode = postcode

    def restrict_country(self, country_codes: str) -> None:
        self.config.document_country = country_codes

    def restrict_state(self, states: str) -> None:
        self.config.document_region = states

    def restrict_type(self, document_types: str) -> None:
        self.config.document_type = document_types

    def enable_vault(self, enabled: bool = True) -> None:
        self.config.vault_save = bool(enabled)

    def generate_contract(
        self, template_id: str, output_format: str = "PDF", prefill_data: Optional[Dict[str, Any]] = None
    ) -> None:
        """Generate a legal document from the verified ID; replaces any pending signature request"""
        template_id, output_format, prefill_data = check_contract(template_id, output_format, prefill_data)
        self.config.contract_generate = template_id
        self.config.contract_sign = ""
        self.config.contract_format = output_format
        self.config.contract_prefill_data = prefill_data

    def sign_contract(
        self, template_id: str, output_format: str = "PDF", prefill_data: Optional[Dict[str, Any]] = None
    ) -> None:
        """Have the user review and sign a document after verification; replaces any generate request"""
        template_id, output_format, prefill_data = check_contract(template_id, output_format, prefill_data)
        self.config.contract_generate = ""
        self.config.contract_sign = template_id
        self.config.contract_format = output_format
        self.config.contract_prefill_data = prefill_data

    # ------------------------
    # Actions
    # ------------------------
    def create_iframe(self) -> DocuPassIdentityResponse:
        """Session for embedding in a web page as an iframe"""
        return self._create(IFRAME)

    def create_mobile(self) -> DocuPassIdentityResponse:
        """Session for opening on a phone or embedding in a mobile app"""
        return self._create(MOBILE)

    def create_redirection(self) -> DocuPassIdentityResponse:
        """Session for opening in any browser"""
        return self._create(REDIRECTION)

    def create_live_mobile(self) -> DocuPassIdentityResponse:
        """Live Mobile session for opening on a phone"""
        return self._create(LIVE_MOBILE)

    def create_signature(
        self, template_id: str, output_format: str = "PDF", prefill_data: Optional[Dict[str, Any]] = None
    ) -> DocuPassSignatureResponse:
        """Signature-only session: the user reviews and signs without identity verification"""
        template_id, output_format, prefill_data = check_contract(template_id, output_format, prefill_data)

        payload = self._session_payload(
            {
                "template_id": template_id,
                "contract_format": output_format,
                "contract_prefill_data": prefill_data,
            }
        )
        return self._call("sign", payload, DocuPassSignatureResponse)

    def validate(self, reference: str, hash: str) -> bool:
        """
        Confirm with the service that a callback's reference and hash are genuine.

        Returns:
            True when the service recognises the pair
        """
        if not reference or not hash:
            raise ValidationError("reference and hash are required")

        payload = self._build_payload({"reference": reference, "hash": hash})
        result = self._call("validate", payload, DocuPassValidationResponse)
        return bool(result.success)

    def _session_payload(self, extra: Dict[str, Any]) -> Dict[str, Any]:
        return self._build_payload(self._config_payload(), {"companyname": self.company_name}, extra)

    def _create(self, session_type: int) -> DocuPassIdentityResponse:
        payload = self._session_payload({"type": session_type})
        return self._call("create", payload, DocuPassIdentityResponse)

import pytest

from idverify import DocuPassAPI
from idverify.errors import ApplicationError, ValidationError
from idverify.models import DocuPassIdentityResponse, DocuPassSignatureResponse
from idverify.network import RangeTableAddressPolicy, StdlibAddressPolicy


@pytest.fixture
def docupass():
    return DocuPassAPI("test-key", "Acme Corp")


def test_company_name_required():
    with pytest.raises(ValidationError, match="please provide your company name"):
        DocuPassAPI("test-key", "")


def test_api_key_checked_before_company_name():
    with pytest.raises(ValidationError, match="please provide an API key"):
        DocuPassAPI("", "")


@pytest.mark.parametrize("policy", [StdlibAddressPolicy(), RangeTableAddressPolicy()])
@pytest.mark.parametrize(
    "url",
    [
        "http://127.0.0.1/hook",
        "http://localhost:8080/hook",
        "http://10.1.2.3/hook",
        "http://192.168.0.20:8443/hook",
        "http://169.254.169.254/latest/meta-data",
        "http://[::1]/hook",
        "http://[fd00::1]/hook",
        "http://[::ffff:127.0.0.1]/hook",
    ],
)
def test_callback_url_rejects_internal_hosts(policy, url):
    docupass = DocuPassAPI("test-key", "Acme Corp", address_policy=policy)

    with pytest.raises(ValidationError, match="does not appear to be a remote host"):
        docupass.set_callback_url(url)
    assert docupass.config.callback_url == ""


@pytest.mark.parametrize("url", ["ftp://example.com/hook", "file://example.com/etc/passwd"])
def test_callback_url_rejects_other_protocols(docupass, url):
    with pytest.raises(ValidationError, match="only http and https"):
        docupass.set_callback_url(url)


@pytest.mark.parametrize("url", ["not a url", "/relative/hook", "example.com/hook"])
def test_callback_url_rejects_malformed(docupass, url):
    with pytest.raises(ValidationError, match="invalid URL format"):
        docupass.set_callback_url(url)


def test_callback_url_accepts_public_host(docupass):
    docupass.set_callback_url("https://example.com/hook")
    assert docupass.config.callback_url == "https://example.com/hook"

    docupass.set_callback_url("http://93.184.216.34:8080/hook")
    assert docupass.config.callback_url == "http://93.184.216.34:8080/hook"

    docupass.set_callback_url("")
    assert docupass.config.callback_url == ""


def test_policy_from_settings(default_settings):
    default_settings.ADDRESS_POLICY = "table"
    assert isinstance(DocuPassAPI("test-key", "Acme Corp").address_policy, RangeTableAddressPolicy)


def test_create_mobile_payload(docupass, fake_post):
    fake_post.respond_with(
        {"reference": "REF1", "url": "https://idv.example.com/REF1", "qrcode": "https://idv.example.com/qr/REF1"}
    )

    response = docupass.create_mobile()

    payload = fake_post.payload
    assert fake_post.last["url"] == "https://api.example.com/docupass/create"
    assert payload["type"] == 1
    assert payload["companyname"] == "Acme Corp"
    assert payload["apikey"] == "test-key"
    assert payload["maxattempt"] == 1
    assert payload["return_type"] == 1
    assert payload["biometric"] == 0
    assert isinstance(response, DocuPassIdentityResponse)
    assert response.reference == "REF1"


@pytest.mark.parametrize(
    "method, session_type",
    [("create_iframe", 0), ("create_mobile", 1), ("create_redirection", 2), ("create_live_mobile", 3)],
)
def test_session_types(docupass, fake_post, method, session_type):
    getattr(docupass, method)()
    assert fake_post.payload["type"] == session_type


def test_create_error_is_raised(docupass, fake_post):
    fake_post.respond_with({"error": {"code": 1, "message": "invalid API key"}})

    with pytest.raises(ApplicationError, match="1: invalid API key"):
        docupass.create_iframe()


def test_max_attempt(docupass):
    for value in (0, 11, 2.5):
        with pytest.raises(ValidationError):
            docupass.set_max_attempt(value)
    docupass.set_max_attempt(10)
    assert docupass.config.max_attempt == 10


def test_callback_image(docupass):
    docupass.set_callback_image(True, False, "base64")
    assert docupass.config.return_type == 0
    assert docupass.config.return_face_image is False

    with pytest.raises(ValidationError):
        docupass.set_callback_image(False, False, "jpeg")
    assert docupass.config.return_type == 0
    assert docupass.config.return_document_image is True


def test_qr_code_format_is_all_or_nothing(docupass):
    with pytest.raises(ValidationError, match="foreground"):
        docupass.set_qr_code_format("ZZZZZZ", "FFFFFF", 5, 1)
    with pytest.raises(ValidationError):
        docupass.set_qr_code_format("000000", "FFFFFF", 51, 1)
    assert docupass.config.qr_color == ""
    assert docupass.config.qr_size == 5

    docupass.set_qr_code_format("112233", "ffeedd", 10, 2)
    assert docupass.config.qr_color == "112233"
    assert docupass.config.qr_bg_color == "ffeedd"
    assert docupass.config.qr_size == 10
    assert docupass.config.qr_margin == 2


def test_redirect_urls(docupass):
    with pytest.raises(ValidationError):
        docupass.set_redirect_url("https://example.com/ok", "nowhere")
    assert docupass.config.success_redir == ""

    docupass.set_redirect_url("https://example.com/ok", "https://example.com/fail")
    assert docupass.config.fail_redir == "https://example.com/fail"


def test_face_verification(docupass):
    docupass.enable_face_verification(True, "video", 0.7)
    assert docupass.config.biometric == 2
    assert docupass.config.biometric_threshold == 0.7

    with pytest.raises(ValidationError):
        docupass.enable_face_verification(True, "photo", 0)
    with pytest.raises(ValidationError):
        docupass.enable_face_verification(True, "hologram", 0.5)
    assert docupass.config.biometric == 2

    docupass.enable_face_verification(False)
    assert docupass.config.biometric == 0


def test_authentication_score(docupass):
    docupass.enable_authentication(True, "1", 0.5)
    assert docupass.config.authenticate_min_score == 0.5
    assert docupass.config.authenticate_module == "1"

    with pytest.raises(ValidationError):
        docupass.enable_authentication(True, "2", 1.5)
    assert docupass.config.authenticate_min_score == 0.5

    docupass.enable_authentication(False)
    assert docupass.config.authenticate_min_score == 0


def test_generate_and_sign_contract_replace_each_other(docupass):
    docupass.generate_contract("tpl-gen", "HTML")
    docupass.sign_contract("tpl-sign")

    assert docupass.config.contract_generate == ""
    assert docupass.config.contract_sign == "tpl-sign"
    assert docupass.config.contract_format == "PDF"

    docupass.generate_contract("tpl-gen")
    assert docupass.config.contract_sign == ""
    assert docupass.config.contract_generate == "tpl-gen"


def test_create_signature(docupass, fake_post):
    fake_post.respond_with({"reference": "SIG1", "url": "https://idv.example.com/SIG1"})

    response = docupass.create_signature("tpl-9", "DOCX", {"name": "Jane"})

    payload = fake_post.payload
    assert fake_post.last["url"] == "https://api.example.com/docupass/sign"
    assert payload["template_id"] == "tpl-9"
    assert payload["contract_format"] == "DOCX"
    assert payload["contract_prefill_data"] == {"name": "Jane"}
    assert payload["companyname"] == "Acme Corp"
    assert isinstance(response, DocuPassSignatureResponse)
    assert response.reference == "SIG1"


def test_validate_sends_only_reference_and_hash(docupass, fake_post):
    fake_post.respond_with({"success": True, "reference": "REF1"})

    assert docupass.validate("REF1", "abc123") is True
    assert fake_post.last["url"] == "https://api.example.com/docupass/validate"
    assert fake_post.payload == {"reference": "REF1", "hash": "abc123", "apikey": "test-key", "client": "python-sdk"}


def test_validate_failure(docupass, fake_post):
    fake_post.respond_with({"success": False})
    assert docupass.validate("REF1", "forged") is False

    fake_post.respond_with({"error": {"code": 23, "message": "invalid reference"}})
    with pytest.raises(ApplicationError):
        docupass.validate("REF1", "abc123")


def test_validate_requires_arguments(docupass, fake_post):
    with pytest.raises(ValidationError):
        docupass.validate("", "abc123")
    assert fake_post.calls == []


def test_reset_config(docupass, fake_post):
    docupass.set_custom_id("user-1")
    docupass.enable_phone_verification()
    docupass.reset_config()

    assert docupass.config.custom_id == ""
    assert docupass.config.phone_verification is False
    assert docupass.company_name == "Acme Corp"

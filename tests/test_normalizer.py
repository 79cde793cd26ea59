import logging

import pytest

from idverify import normalizer
from idverify.errors import ApplicationError, ResponseDecodeError
from idverify.models import (
    AMLResponse,
    CoreDualSideResponse,
    CoreResponse,
    DocuPassIdentityCallback,
    VaultListResponse,
)
from idverify.normalizer import decode, normalize


def test_missing_fields_stay_none():
    result = decode(CoreResponse, {"face": {"confidence": 0}})

    assert result.face.confidence == 0.0
    assert result.face.is_identical is None
    assert result.result is None
    assert result.error is None


def test_unknown_fields_are_ignored():
    result = decode(CoreResponse, {"responseID": "r1", "brand_new_field": {"x": 1}})
    assert result.response_id == "r1"


def test_malformed_nested_field_is_dropped_alone():
    body = {"result": {"firstName": "JANE", "age": "old"}, "executionTime": 1.25}

    result = decode(CoreResponse, body)

    assert result.result.first_name == "JANE"
    assert result.result.age is None
    assert result.execution_time == 1.25
    assert body["result"]["age"] == "old"


def test_malformed_union_field_is_dropped():
    result = decode(CoreDualSideResponse, {"output": 5, "outputface": "https://cdn.example.com/face.jpg"})

    assert result.output is None
    assert result.output_face == "https://cdn.example.com/face.jpg"


def test_dual_side_output_is_a_list():
    result = decode(CoreDualSideResponse, {"output": ["front.jpg", "back.jpg"]})
    assert result.output == ["front.jpg", "back.jpg"]


def test_aml_list_is_wrapped():
    result = decode(CoreResponse, {"aml": [{"entity": "person", "fullname": ["JOHN DOE"]}]})
    assert result.aml.items[0].fullname == ["JOHN DOE"]


def test_non_object_body_decodes_to_empty():
    assert decode(CoreResponse, ["unexpected"]) == CoreResponse()


def test_strict_decode_raises(default_settings):
    default_settings.STRICT_DECODE = True

    with pytest.raises(ResponseDecodeError):
        decode(CoreResponse, {"result": {"age": "old"}})


def test_embedded_error_raises_with_result():
    body = {"error": {"code": 14, "message": "mismatch"}, "result": {"firstName": "JANE"}}

    with pytest.raises(ApplicationError) as exc_info:
        normalize(CoreResponse, body)

    assert str(exc_info.value) == "14: mismatch"
    assert exc_info.value.code == 14
    assert exc_info.value.result.result.first_name == "JANE"


def test_empty_error_message_is_success():
    result = normalize(CoreResponse, {"error": {"code": 0, "message": ""}, "quota": 10})
    assert result.quota == 10


def test_callback_body_decodes():
    body = {
        "success": True,
        "reference": "REF123",
        "hash": "abc",
        "customid": "user-7",
        "data": {"documentNumber": "X1234567", "fullName": "JANE DOE"},
        "phone": {"number": "+15550100", "type": "mobile"},
        "documentimage": [{"side": "front", "type": "url", "content": "https://cdn.example.com/f.jpg"}],
        "vaultid": "V1",
    }

    callback = decode(DocuPassIdentityCallback, body)

    assert callback.success is True
    assert callback.data.document_number == "X1234567"
    assert callback.documentimage[0].side == "front"
    assert callback.vault_id == "V1"


def test_bad_leaf_in_list_member_keeps_the_list():
    body = {
        "items": [
            {"entity": "person", "fullname": ["JOHN DOE"], "database": "us_ofac"},
            {"entity": "person", "fullname": ["JANE ROE"], "time": 1700000000},
        ]
    }

    result = decode(AMLResponse, body)

    assert len(result.items) == 2
    assert result.items[0].fullname == ["JOHN DOE"]
    assert result.items[1].fullname == ["JANE ROE"]
    assert result.items[1].time is None


def test_bad_leaf_in_wrapped_aml_list_keeps_the_match():
    result = decode(CoreResponse, {"aml": [{"fullname": "JOHN DOE", "database": "us_ofac"}]})

    assert len(result.aml.items) == 1
    assert result.aml.items[0].fullname is None
    assert result.aml.items[0].database == "us_ofac"


def test_bad_leaf_in_vault_items_keeps_other_records():
    body = {
        "total": 2,
        "items": [
            {"id": "V1", "firstName": "JANE"},
            {"id": "V2", "firstName": "JOHN", "image": [{"id": 7, "url": "https://cdn.example.com/v2.jpg"}]},
        ],
    }

    result = decode(VaultListResponse, body)

    assert [record.id for record in result.items] == ["V1", "V2"]
    assert result.items[1].get("firstName") == "JOHN"
    assert result.items[1].image[0].id is None
    assert result.items[1].image[0].url == "https://cdn.example.com/v2.jpg"


def test_malformed_list_member_is_removed_alone():
    result = decode(VaultListResponse, {"items": [{"id": "V1"}, 5, {"id": "V3"}]})
    assert [record.id for record in result.items] == ["V1", "V3"]


def test_fallback_to_empty_result_is_logged(monkeypatch, caplog):
    monkeypatch.setattr(normalizer, "MAX_DECODE_PASSES", 1)

    with caplog.at_level(logging.WARNING, logger="idverify.normalizer"):
        result = decode(CoreResponse, {"result": {"age": "old"}, "quota": 3})

    assert result == CoreResponse()
    assert "Could not decode CoreResponse" in caplog.text

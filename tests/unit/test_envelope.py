import pytest
from pydantic import ValidationError

from lib.contracts.envelope import ResponseEnvelope


def test_success_payload_has_data_only():
    payload = ResponseEnvelope.success("a@b.c", [0, 1]).to_payload()
    assert payload == {"is_success": True, "official_email": "a@b.c", "data": [0, 1]}


def test_success_without_data():
    payload = ResponseEnvelope.success("a@b.c").to_payload(include_data=False)
    assert payload == {"is_success": True, "official_email": "a@b.c"}


def test_failure_payload_has_error_only():
    payload = ResponseEnvelope.failure("a@b.c", "Invalid key").to_payload()
    assert payload == {"is_success": False, "official_email": "a@b.c", "error": "Invalid key"}


def test_exclusive_fields_enforced():
    with pytest.raises(ValidationError):
        ResponseEnvelope(is_success=True, error="x")
    with pytest.raises(ValidationError):
        ResponseEnvelope(is_success=False, data=1, error="x")
    with pytest.raises(ValidationError):
        ResponseEnvelope(is_success=False)

import pytest
from pydantic import BaseModel, Field

from framework.core.handles import JSONBody, RawBody, RequestSerializationError
from framework.core.handles.body import JSON_MEDIA_TYPE, as_request_body, encode_body


class Payload(BaseModel):
    display_name: str = Field(alias="displayName")
    description: str | None = None


@pytest.mark.unit()
def test_as_request_body():
    raw = RawBody("text")
    assert as_request_body(None) is None
    assert as_request_body(raw) is raw
    assert as_request_body({"a": 1}) == JSONBody({"a": 1})


@pytest.mark.unit()
def test_encode_no_body():
    assert encode_body(None) == (None, [])
    assert encode_body(RawBody("")) == (None, [])


@pytest.mark.unit()
def test_encode_raw_body():
    assert encode_body(RawBody("a=1")) == (b"a=1", [])


@pytest.mark.unit()
def test_encode_model_by_alias_without_none():
    content, headers = encode_body(JSONBody(Payload(displayName="A")))
    assert content == b'{"displayName":"A"}'
    assert headers == [("Content-Type", JSON_MEDIA_TYPE)]


@pytest.mark.unit()
def test_encode_failure():
    with pytest.raises(RequestSerializationError):
        encode_body(JSONBody({1, object()}))
    with pytest.raises(RequestSerializationError):
        encode_body("not tagged")  # type: ignore[arg-type]

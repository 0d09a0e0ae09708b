"""User Schemas — body requirements and record serialization."""

import pytest
from pydantic import ValidationError

from user_api.models.user import User
from user_api.schemas.user import DataEnvelope, ErrorEnvelope, UserBody, UserResponse


def test_body_requires_email_and_name():
    with pytest.raises(ValidationError):
        UserBody(email="a@example.com")


def test_body_does_not_validate_email_format():
    assert UserBody(email="not-an-email", name="X").email == "not-an-email"


def test_response_reads_orm_attributes():
    user = User(id=3, email="a@example.com", name="Ann")
    assert UserResponse.model_validate(user).model_dump() == {
        "id": 3, "email": "a@example.com", "name": "Ann",
    }


def test_envelopes_are_distinct_shapes():
    ok = DataEnvelope[UserResponse](data=UserResponse(id=1, email="e", name="n"))
    err = ErrorEnvelope(errors=[{"detail": "Invalid ID"}])
    assert set(ok.model_dump()) == {"data"}
    assert set(err.model_dump()) == {"errors"}

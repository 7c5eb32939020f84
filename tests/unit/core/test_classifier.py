"""
Tests for status code classification.
"""

import pytest

from rest_resource.core.classifier import Outcome, OutcomeKind, classify, outcome_exception
from rest_resource.core.exceptions import (
    BadRequest,
    ClientError,
    ConnectionError,
    ForbiddenAccess,
    MethodNotAllowed,
    Redirection,
    ResourceConflict,
    ResourceGone,
    ResourceInvalid,
    ResourceNotFound,
    ServerError,
    UnauthorizedAccess,
)
from rest_resource.core.models import ClassifiedResponse


class TestClassify:
    """Test classify() table."""

    @pytest.mark.parametrize("code,kind", [
        (200, OutcomeKind.SUCCESS),
        (201, OutcomeKind.SUCCESS),
        (204, OutcomeKind.SUCCESS),
        (304, OutcomeKind.SUCCESS),
        (399, OutcomeKind.SUCCESS),
        (301, OutcomeKind.REDIRECTION),
        (302, OutcomeKind.REDIRECTION),
        (400, OutcomeKind.BAD_REQUEST),
        (401, OutcomeKind.UNAUTHORIZED_ACCESS),
        (403, OutcomeKind.FORBIDDEN_ACCESS),
        (404, OutcomeKind.RESOURCE_NOT_FOUND),
        (405, OutcomeKind.METHOD_NOT_ALLOWED),
        (409, OutcomeKind.RESOURCE_CONFLICT),
        (410, OutcomeKind.RESOURCE_GONE),
        (422, OutcomeKind.RESOURCE_INVALID),
        (402, OutcomeKind.CLIENT_ERROR),
        (429, OutcomeKind.CLIENT_ERROR),
        (499, OutcomeKind.CLIENT_ERROR),
        (500, OutcomeKind.SERVER_ERROR),
        (503, OutcomeKind.SERVER_ERROR),
        (599, OutcomeKind.SERVER_ERROR),
    ])
    def test_table(self, code, kind):
        assert classify(code).kind is kind

    def test_string_code_is_parsed(self):
        assert classify("404").kind is OutcomeKind.RESOURCE_NOT_FOUND

    @pytest.mark.parametrize("code", [100, 199, 600, 999, 0])
    def test_unknown_codes(self, code):
        outcome = classify(code)
        assert outcome.kind is OutcomeKind.CONNECTION_ERROR
        assert outcome.message == f"Unknown response code: {code}"

    def test_unparseable_code(self):
        outcome = classify("abc")
        assert outcome.kind is OutcomeKind.CONNECTION_ERROR
        assert outcome.message == "Unknown response code: abc"

    def test_none_code(self):
        assert classify(None).kind is OutcomeKind.CONNECTION_ERROR

    def test_success_flags(self):
        assert classify(200).is_success
        assert not classify(200).is_error
        assert classify(500).is_error

    def test_outcomes_compare_by_value(self):
        assert classify(404) == Outcome(OutcomeKind.RESOURCE_NOT_FOUND)


class TestOutcomeException:
    """Test mapping of outcomes to exceptions."""

    @pytest.mark.parametrize("code,exc_class", [
        (301, Redirection),
        (400, BadRequest),
        (401, UnauthorizedAccess),
        (403, ForbiddenAccess),
        (404, ResourceNotFound),
        (405, MethodNotAllowed),
        (409, ResourceConflict),
        (410, ResourceGone),
        (422, ResourceInvalid),
        (418, ClientError),
        (502, ServerError),
    ])
    def test_error_kinds(self, code, exc_class):
        response = ClassifiedResponse(code, url="https://api.example.com/x")
        exc = outcome_exception(response.outcome, response)
        assert type(exc) is exc_class
        assert exc.response is response
        assert exc.status_code == code

    def test_success_has_no_exception(self):
        assert outcome_exception(classify(200)) is None

    def test_unknown_code_message(self):
        response = ClassifiedResponse(999)
        exc = outcome_exception(response.outcome, response)
        assert type(exc) is ConnectionError
        assert str(exc) == "Unknown response code: 999"

    def test_all_status_errors_share_base(self):
        for code in (301, 404, 422, 500, 999):
            response = ClassifiedResponse(code)
            assert isinstance(response.exception, ConnectionError)

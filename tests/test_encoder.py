"""Tests for JSON encoding of stat results and errors."""

import json
from datetime import datetime, timezone

import pytest

from statapi.encoder import encode_error, encode_result, error_response, stat_response
from statapi.exceptions import (
    ForbiddenError,
    NotFoundError,
    RequestCanceledError,
    RouteNotFoundError,
    StatAPIError,
    status_message,
)
from statapi.types import DirStat, FileStat
from statapi.utils import entry_name, format_timestamp

MTIME = datetime(2023, 1, 1, tzinfo=timezone.utc)


class TestEncodeResult:
    """Test descriptor serialization."""

    def test_file_shape(self):
        result = FileStat(name="readme.txt", path="/tmp/readme.txt", size=1024, mtime=MTIME)

        assert encode_result(result) == {
            "type": "file",
            "name": "readme.txt",
            "path": "/tmp/readme.txt",
            "size": 1024,
            "mtime": "2023-01-01T00:00:00Z",
        }

    def test_directory_shape_has_no_size(self):
        result = DirStat(name="tmp", path="/tmp", mtime=MTIME)

        encoded = encode_result(result)

        assert encoded == {
            "type": "directory",
            "name": "tmp",
            "path": "/tmp",
            "mtime": "2023-01-01T00:00:00Z",
        }
        assert "size" not in encoded

    def test_unknown_result_rejected(self):
        with pytest.raises(TypeError):
            encode_result(object())

    def test_file_response_body(self):
        result = FileStat(name="readme.txt", path="/tmp/readme.txt", size=1024, mtime=MTIME)

        response = stat_response(result)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert json.loads(response.body) == encode_result(result)


class TestEncodeError:
    """Test error envelopes."""

    def test_not_found_envelope(self):
        status, envelope = encode_error(NotFoundError("/missing"))

        assert status == 404
        assert envelope == {
            "status": "error",
            "code": 404,
            "path": "/missing",
            "message": "Not Found",
        }

    def test_forbidden_envelope(self):
        status, envelope = encode_error(ForbiddenError("/secret"))

        assert status == 403
        assert envelope["message"] == "Forbidden"
        assert envelope["path"] == "/secret"

    def test_route_error_omits_path(self):
        status, envelope = encode_error(RouteNotFoundError())

        assert status == 404
        assert envelope == {
            "status": "error",
            "code": 404,
            "message": "not a valid API endpoint",
        }

    def test_canceled_envelope(self):
        status, envelope = encode_error(RequestCanceledError("/slow"))

        assert status == 499
        assert envelope["message"] == "client closed request"

    def test_unclassified_error_keeps_raw_text(self):
        status, envelope = encode_error(OSError(5, "Input/output error"))

        assert status == 500
        assert envelope == {
            "status": "error",
            "code": 500,
            "message": "[Errno 5] Input/output error",
        }

    def test_unclassified_error_redacted(self):
        status, envelope = encode_error(OSError(5, "Input/output error"), redact=True)

        assert status == 500
        assert envelope["message"] == "Internal Server Error"

    def test_error_response_status(self):
        response = error_response(ForbiddenError("/secret"))

        assert response.status_code == 403
        assert response.headers["content-type"] == "application/json"
        assert json.loads(response.body)["code"] == 403


class TestMessages:
    """Test status message lookup and formatting helpers."""

    def test_known_status_message(self):
        assert status_message(404) == "Not Found"

    def test_unknown_status_message(self):
        assert status_message(799) == "unknown error"

    def test_error_string(self):
        assert str(NotFoundError("/x")) == "error 404: Not Found"

    def test_domain_errors_share_base(self):
        assert isinstance(ForbiddenError("/x"), StatAPIError)

    def test_timestamp_with_fraction(self):
        value = datetime(2023, 1, 1, 12, 30, 5, 250000, tzinfo=timezone.utc)

        assert format_timestamp(value) == "2023-01-01T12:30:05.250000Z"

    def test_naive_timestamp_treated_as_utc(self):
        assert format_timestamp(datetime(2023, 1, 1)) == "2023-01-01T00:00:00Z"

    def test_entry_name(self):
        assert entry_name("/tmp/readme.txt") == "readme.txt"
        assert entry_name("/tmp/docs/") == "docs"
        assert entry_name("/") == "/"

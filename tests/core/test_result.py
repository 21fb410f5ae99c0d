"""Tests for kasos_docs.core.result."""

import pytest

from kasos_docs.core.errors import MetadataError
from kasos_docs.core.result import Err, Ok, partition_results, try_result


class TestOk:
    def test_accessors(self):
        result = Ok(5)

        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 5
        assert result.unwrap_or(0) == 5

    def test_map(self):
        assert Ok(2).map(lambda v: v * 10) == Ok(20)

    def test_map_err_is_noop(self):
        result = Ok(1)

        assert result.map_err(lambda e: RuntimeError("x")) is result

    def test_to_dict(self):
        assert Ok("v").to_dict() == {"ok": True, "value": "v"}


class TestErr:
    def test_unwrap_raises_wrapped_error(self):
        error = ValueError("bad")

        with pytest.raises(ValueError, match="bad"):
            Err(error).unwrap()

    def test_unwrap_or(self):
        assert Err(ValueError()).unwrap_or(7) == 7

    def test_map_passes_through(self):
        error = ValueError("bad")

        assert Err(error).map(lambda v: v + 1).error is error

    def test_map_err(self):
        result = Err(ValueError("bad")).map_err(lambda e: MetadataError(str(e)))

        assert isinstance(result.error, MetadataError)

    def test_to_dict_for_docs_error(self):
        data = Err(MetadataError("nope").with_context(step="sitemap")).to_dict()

        assert data == {
            "ok": False,
            "error": {
                "error_type": "MetadataError",
                "message": "nope",
                "category": "METADATA",
                "context": {"step": "sitemap"},
            },
        }

    def test_to_dict_for_plain_exception(self):
        assert Err(KeyError("k")).to_dict()["error"]["error_type"] == "KeyError"


class TestHelpers:
    def test_try_result_ok(self):
        assert try_result(lambda: 3) == Ok(3)

    def test_try_result_err(self):
        result = try_result(lambda: int("x"))

        assert result.is_err()
        assert isinstance(result.error, ValueError)

    def test_partition_results(self):
        e1, e2 = ValueError("a"), KeyError("b")

        values, errors = partition_results([Ok(1), Err(e1), Ok(2), Err(e2)])

        assert values == [1, 2]
        assert errors == [e1, e2]

    def test_pattern_matching(self):
        match try_result(lambda: 1 / 0):
            case Ok(value):
                pytest.fail(f"unexpected value {value}")
            case Err(error):
                assert isinstance(error, ZeroDivisionError)

import json

from sqlalchemy.exc import OperationalError, TimeoutError as PoolTimeoutError

from todo_api.errors import AppError, AppErrorType


class TestMessageResolution:
    def test_db_error_default_message(self):
        err = AppError(AppErrorType.DB_ERROR)
        assert err.resolve_message() == "An unexpected error has occurred"

    def test_not_found_default_message(self):
        err = AppError(AppErrorType.NOT_FOUND_ERROR)
        assert err.resolve_message() == "The request item was not found"

    def test_explicit_message_wins_for_every_kind(self):
        for kind in AppErrorType:
            err = AppError(kind, message="unable to create item", cause="boom")
            assert err.resolve_message() == "unable to create item"

    def test_empty_explicit_message_is_still_explicit(self):
        err = AppError(AppErrorType.NOT_FOUND_ERROR, message="")
        assert err.resolve_message() == ""


class TestStatusCodes:
    def test_db_error_is_500(self):
        assert AppError(AppErrorType.DB_ERROR).status_code == 500

    def test_not_found_is_404(self):
        assert AppError(AppErrorType.NOT_FOUND_ERROR).status_code == 404


class TestFromDbError:
    def test_store_failure_becomes_db_error_with_cause(self):
        low = OperationalError("SELECT 1", {}, Exception("connection refused"))
        err = AppError.from_db_error(low)
        assert err.error_type is AppErrorType.DB_ERROR
        assert err.message is None
        assert "connection refused" in err.cause
        assert err.resolve_message() == "An unexpected error has occurred"

    def test_pool_timeout_becomes_db_error(self):
        err = AppError.from_db_error(PoolTimeoutError("QueuePool limit of size 1 overflow 0 reached"))
        assert err.error_type is AppErrorType.DB_ERROR
        assert "QueuePool limit of size 1 overflow 0 reached" in err.cause


class TestResponse:
    def test_body_never_contains_cause(self):
        err = AppError(AppErrorType.DB_ERROR, cause="password authentication failed for user")
        res = err.to_response()
        assert res.status_code == 500
        assert json.loads(res.body) == {"error": "An unexpected error has occurred"}

    def test_not_found_response(self):
        res = AppError(AppErrorType.NOT_FOUND_ERROR).to_response()
        assert res.status_code == 404
        assert json.loads(res.body) == {"error": "The request item was not found"}

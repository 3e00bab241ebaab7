import unittest

from gdrivels.errors import (
    ApiError,
    FetchError,
    GDriveLsError,
    HttpErrorInfo,
    InvalidArgumentError,
    PathResolutionError,
)


class TestExceptions(unittest.TestCase):
    def test_base_error_keeps_details_and_cause(self) -> None:
        cause = RuntimeError("root")
        err = GDriveLsError("msg", details={"k": "v"}, cause=cause)
        self.assertEqual(str(err), "msg")
        self.assertEqual(err.details["k"], "v")
        self.assertIs(err.cause, cause)

    def test_details_default_to_empty_dict(self) -> None:
        self.assertEqual(FetchError("x").details, {})

    def test_all_errors_share_base(self) -> None:
        for cls in (ApiError, FetchError, InvalidArgumentError, PathResolutionError):
            self.assertTrue(issubclass(cls, GDriveLsError))

    def test_http_error_info_as_details(self) -> None:
        info = HttpErrorInfo(status_code=403, reason="forbidden", message="nope")
        self.assertEqual(info.as_details(), {"status_code": 403, "reason": "forbidden"})


if __name__ == "__main__":
    unittest.main()

import unittest
from unittest.mock import patch

import jwt
from fastapi import HTTPException

from app.config import Settings
from app.core.security import authenticate_request


def _settings(**overrides):
    values = {"API_TOKENS": None, "JWT_SECRET": None}
    values.update(overrides)
    return Settings(**values)


class SecurityTest(unittest.TestCase):
    def test_static_token(self):
        with patch("app.core.security.get_settings", return_value=_settings(API_TOKENS="a, b")):
            self.assertEqual(authenticate_request("Bearer b"), {"auth_type": "api_token"})

    def test_missing_header(self):
        with patch("app.core.security.get_settings", return_value=_settings(API_TOKENS="a")):
            with self.assertRaises(HTTPException) as ctx:
                authenticate_request(None)
        self.assertEqual(ctx.exception.status_code, 401)

    def test_non_bearer_scheme(self):
        with patch("app.core.security.get_settings", return_value=_settings(API_TOKENS="a")):
            with self.assertRaises(HTTPException):
                authenticate_request("Basic a")

    def test_nothing_configured_rejects_everything(self):
        with patch("app.core.security.get_settings", return_value=_settings()):
            with self.assertRaises(HTTPException) as ctx:
                authenticate_request("Bearer anything")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_valid_jwt(self):
        token = jwt.encode({"sub": "42"}, "s3cret-key-for-tests-only-0123456789", algorithm="HS256")
        settings = _settings(JWT_SECRET="s3cret-key-for-tests-only-0123456789")
        with patch("app.core.security.get_settings", return_value=settings):
            result = authenticate_request("Bearer {}".format(token))
        self.assertEqual(result["auth_type"], "jwt")
        self.assertEqual(result["payload"]["sub"], "42")

    def test_jwt_with_wrong_secret(self):
        token = jwt.encode({"sub": "42"}, "another-secret-another-secret-000000", algorithm="HS256")
        settings = _settings(JWT_SECRET="s3cret-key-for-tests-only-0123456789")
        with patch("app.core.security.get_settings", return_value=settings):
            with self.assertRaises(HTTPException) as ctx:
                authenticate_request("Bearer {}".format(token))
        self.assertEqual(ctx.exception.status_code, 401)


if __name__ == "__main__":
    unittest.main()

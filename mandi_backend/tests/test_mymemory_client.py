"""
/**
 * @file mandi_backend/tests/test_mymemory_client.py
 * @description MyMemory client tests using a mocked requests session.
 */
"""

import unittest
from unittest.mock import patch

import requests

from mandi_backend.config import Settings
from mandi_backend.models import FailureCause, UpstreamError
from mandi_backend.services.mymemory_client_service import MyMemoryClient
from mandi_backend.tests.helpers import make_response, make_session, translated_payload


class TestMyMemoryClient(unittest.TestCase):
    def test_request_params(self):
        session = make_session(make_response(payload=translated_payload("नमस्ते")))
        client = MyMemoryClient(settings=Settings(), session=session)

        self.assertEqual(client.translate("hello", "hi"), "नमस्ते")
        session.get.assert_called_once_with(
            "https://api.mymemory.translated.net/get",
            params={"q": "hello", "langpair": "en|hi"},
            timeout=None,
        )

    def test_target_lang_passed_through_unvalidated(self):
        session = make_session(make_response(payload=translated_payload("x")))
        client = MyMemoryClient(session=session)
        client.translate("", "not-a-language")
        _, kwargs = session.get.call_args
        self.assertEqual(kwargs["params"], {"q": "", "langpair": "en|not-a-language"})

    def test_configured_timeout_used(self):
        session = make_session(make_response(payload=translated_payload("x")))
        MyMemoryClient(settings=Settings(upstream_timeout=3.5), session=session).translate("a", "mr")
        self.assertEqual(session.get.call_args[1]["timeout"], 3.5)

    def _assert_cause(self, session, cause):
        client = MyMemoryClient(session=session)
        with self.assertRaises(UpstreamError) as ctx:
            client.translate("hello", "hi")
        self.assertEqual(ctx.exception.cause, cause)
        return ctx.exception

    def test_timeout(self):
        self._assert_cause(make_session(side_effect=requests.Timeout("read timed out")), FailureCause.TIMEOUT)

    def test_connection_error(self):
        self._assert_cause(make_session(side_effect=requests.ConnectionError("refused")), FailureCause.NETWORK)

    def test_non_2xx(self):
        err = self._assert_cause(make_session(make_response(status_code=503, text="unavailable")), FailureCause.HTTP_STATUS)
        self.assertEqual(err.status_code, 503)

    def test_invalid_json(self):
        session = make_session(make_response(json_error=ValueError("Expecting value")))
        self._assert_cause(session, FailureCause.MALFORMED_PAYLOAD)

    def test_missing_translated_text(self):
        self._assert_cause(make_session(make_response(payload={"responseData": {}})), FailureCause.MALFORMED_PAYLOAD)
        self._assert_cause(make_session(make_response(payload=["not", "an", "object"])), FailureCause.MALFORMED_PAYLOAD)

    def test_unencodable_request(self):
        error = UnicodeEncodeError("utf-8", "\ud800", 0, 1, "surrogates not allowed")
        self._assert_cause(make_session(side_effect=error), FailureCause.INVALID_REQUEST)

    @patch("mandi_backend.services.mymemory_client_service.requests.get")
    def test_without_session_uses_requests_get(self, mock_get):
        mock_get.return_value = make_response(payload=translated_payload("नमस्कार"))
        client = MyMemoryClient(settings=Settings())

        self.assertEqual(client.translate("hello", "mr"), "नमस्कार")
        self.assertEqual(client.translate("hello", "mr"), "नमस्कार")
        self.assertEqual(mock_get.call_count, 2)
        self.assertEqual(mock_get.call_args[1]["params"], {"q": "hello", "langpair": "en|mr"})

    def test_provider_error_status(self):
        payload = {
            "responseData": {"translatedText": "'HI' IS AN INVALID TARGET LANGUAGE"},
            "responseStatus": "403",
            "responseDetails": "'HI' IS AN INVALID TARGET LANGUAGE",
        }
        self._assert_cause(make_session(make_response(payload=payload)), FailureCause.PROVIDER_ERROR)


if __name__ == "__main__":
    unittest.main()

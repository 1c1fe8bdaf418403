"""
/**
 * @file mandi_backend/tests/helpers.py
 * @description Stub upstream session builders (no real network requests).
 */
"""

from unittest.mock import Mock

import requests


def make_response(status_code=200, payload=None, text="", json_error=None):
    response = Mock()
    response.status_code = status_code
    response.text = text
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def make_session(response=None, side_effect=None):
    session = Mock(spec=requests.Session)
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = response
    return session


def translated_payload(text):
    return {"responseData": {"translatedText": text, "match": 1}, "responseStatus": 200}

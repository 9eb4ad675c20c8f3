"""
Pytest configuration and fixtures for CEPFinder tests.
"""

from unittest import mock

import pytest
import requests


def make_response(status_code=200, payload=None, json_error=None):
    """Build a stand-in for a ``requests.Response``."""
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code

    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload

    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    else:
        response.raise_for_status.return_value = None

    return response


@pytest.fixture
def sample_payload():
    """ViaCEP response for Praça da Sé, São Paulo."""
    return {
        "cep": "01001000",
        "logradouro": "Praça da Sé",
        "bairro": "Sé",
        "localidade": "São Paulo",
        "uf": "SP",
    }


@pytest.fixture
def session():
    """HTTP session stub with no response configured."""
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def ok_session(session, sample_payload):
    """Session stub answering every request with the sample payload."""
    session.get.return_value = make_response(200, sample_payload)
    return session

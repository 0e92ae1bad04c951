"""
Shared fixtures for DocuSign Wrapper tests.
"""

import copy

import pytest

from docusign_wrapper.api import DocuSignClient
from docusign_wrapper.config import DocuSignConfig

PUBLIC_HOST = "https://www.docusign.net/restapi/v2"
REGIONAL_HOST = "https://na3.docusign.net/restapi/v2/"
ACCOUNT_ID = "1234567"


def login_information(account_id=ACCOUNT_ID, base_url="https://na3.docusign.net/restapi/v2/accounts/1234567"):
    """Build a login_information response listing one account."""
    return {
        "loginAccounts": [
            {
                "name": "Other Co",
                "accountId": "7654321",
                "baseUrl": "https://eu.docusign.net/restapi/v2/accounts/7654321",
                "isDefault": "true",
            },
            {
                "name": "Acme",
                "accountId": account_id,
                "baseUrl": base_url,
                "isDefault": "false",
            },
        ]
    }


class FakeTransport:
    """Transport double answering from the owning FakeDocuSign."""
    
    def __init__(self, server, host):
        self.server = server
        self.host = host
        self.closed = False
    
    def request(self, method, endpoint, params=None, headers=None):
        self.server.calls.append({
            "host": self.host,
            "method": method,
            "endpoint": endpoint,
            "params": params,
            "headers": headers,
        })
        response = self.server.responses[endpoint]
        if isinstance(response, list):
            response = response.pop(0)
        return copy.deepcopy(response)
    
    def close(self):
        self.closed = True


class FakeDocuSign:
    """
    Transport factory serving canned responses keyed by endpoint path.
    
    Records every transport built and every request made.
    """
    
    def __init__(self, responses=None):
        self.responses = {"/login_information": login_information()}
        self.responses.update(responses or {})
        self.transports = []
        self.calls = []
    
    def __call__(self, host, config):
        transport = FakeTransport(self, host)
        self.transports.append(transport)
        return transport
    
    def calls_to(self, endpoint):
        return [call for call in self.calls if call["endpoint"] == endpoint]


@pytest.fixture
def fake_docusign():
    """Fake DocuSign server with a reachable account."""
    return FakeDocuSign()


@pytest.fixture
def client(fake_docusign):
    """Client logged in against the fake server."""
    return DocuSignClient(
        PUBLIC_HOST,
        "user@example.com",
        "secret",
        "integrator-key",
        ACCOUNT_ID,
        config=DocuSignConfig(),
        transport_factory=fake_docusign,
    )

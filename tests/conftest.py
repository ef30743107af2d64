import json

import pytest
import requests
from django.apps import apps

from billing.client import BillingClient
from billing.conf import BillingConfig


def make_response(status_code, body, prepared=None):
    response = requests.Response()
    response.status_code = status_code
    response.reason = 'OK' if 200 <= status_code <= 299 else 'Error'
    if not isinstance(body, str):
        body = json.dumps(body)
    response._content = body.encode('utf-8')
    response.encoding = 'utf-8'
    response.headers['Content-Type'] = 'application/json'
    if prepared is not None:
        response.request = prepared
        response.url = prepared.url
    return response


class StubSession(requests.Session):
    """Session that records prepared requests and answers from a queue instead of the network."""

    def __init__(self):
        super().__init__()
        self.sent = []
        self.replies = []
        self.timeouts = []

    def reply(self, status_code, body):
        self.replies.append((status_code, body))

    def fail(self, exc):
        self.replies.append(exc)

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.timeouts.append(kwargs.get('timeout'))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return make_response(reply[0], reply[1], request)


@pytest.fixture
def billing_config():
    return BillingConfig(app_id='app42', app_token='s3cr3t', env='sandbox')


@pytest.fixture
def session():
    return StubSession()


@pytest.fixture
def billing_client(billing_config, session):
    return BillingClient(billing_config, session=session)


@pytest.fixture
def app_billing_config(monkeypatch):
    """Replace the config the billing app read at startup."""
    app_config = apps.get_app_config('billing')

    def install(config):
        monkeypatch.setattr(app_config, 'billing_config', config)
        return config

    return install

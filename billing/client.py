"""
HTTP client for the Akouendy billing API.

One blocking request per call. Hooks run synchronously: request_before gets
the prepared request right before it is sent, response_after gets the raw
response right after it arrives. Anything a hook raises aborts the call.
"""

import json
import logging
from urllib.parse import quote, urljoin

import requests

from billing.conf import DEFAULT_USER_AGENT
from billing.exceptions import BillingDecodeError, BillingHTTPError

logger = logging.getLogger(__name__)

ORDER_CREATE_PATH = 'order/create'
ORDER_CHECK_PATH = 'order/check'
PAYMENT_INIT_PATH = 'billing/payment/init'
PAYMENT_STATUS_PATH = 'payment/{token}'


def dump_request(prepared):
    body = prepared.body
    if isinstance(body, bytes):
        body = body.decode('utf-8', errors='replace')
    headers = '\n'.join(f'{k}: {v}' for k, v in prepared.headers.items())
    return f'{prepared.method} {prepared.url}\n{headers}\n\n{body or ""}'


def dump_response(response):
    headers = '\n'.join(f'{k}: {v}' for k, v in response.headers.items())
    return f'HTTP {response.status_code} {response.reason or ""}\n{headers}\n\n{response.text}'


class BillingClient:

    def __init__(self, config, session=None, request_before=None, response_after=None, user_agent=None):
        self.config = config
        self.endpoint = config.base_url
        if not self.endpoint.endswith('/'):
            self.endpoint += '/'
        self.session = session or requests.Session()
        self.request_before = request_before
        self.response_after = response_after
        self.user_agent = user_agent or config.user_agent or DEFAULT_USER_AGENT

    def url_for(self, path):
        return urljoin(self.endpoint, path.lstrip('/'))

    # ==================== Routes ====================

    def create_order(self, order):
        return self.post(ORDER_CREATE_PATH, order.to_payload())

    def check_order(self, check):
        return self.post(ORDER_CHECK_PATH, check.to_payload())

    def init_payment(self, payment):
        return self.post(PAYMENT_INIT_PATH, payment.to_payload())

    def payment_status(self, payment_token):
        return self.get(PAYMENT_STATUS_PATH.format(token=quote(payment_token, safe='')))

    # ==================== Transport ====================

    def post(self, path, payload):
        return self.send('POST', path, payload)

    def get(self, path):
        return self.send('GET', path)

    def send(self, method, path, payload=None):
        """
        Send one request and return the decoded JSON object of a 2xx answer.
        Non-2xx raises BillingHTTPError with the body as message; transport
        errors from requests propagate untouched.
        """
        headers = {
            'Content-Type': 'application/json',
            'User-Agent': self.user_agent,
        }
        data = json.dumps(payload) if payload is not None else None
        request = requests.Request(method, self.url_for(path), data=data, headers=headers)
        prepared = self.session.prepare_request(request)
        # session defaults must not override the SDK headers
        prepared.headers.update(headers)

        if self.request_before is not None:
            self.request_before(prepared)

        if self.config.debug:
            logger.info(f'DumpRequest = {dump_request(prepared)}')

        response = self.session.send(prepared, timeout=self.config.timeout)

        if self.config.debug:
            logger.info(f'DumpResponse = {dump_response(response)}')

        if self.response_after is not None:
            self.response_after(response)

        return self.decode(response)

    def decode(self, response):
        body = response.text
        if not 200 <= response.status_code <= 299:
            logger.warning(f'Billing API {response.request.method if response.request else ""} '
                           f'{response.url} returned HTTP {response.status_code}')
            raise BillingHTTPError(response.status_code, body)

        try:
            data = json.loads(body)
        except ValueError:
            data = None
        if not isinstance(data, dict):
            logger.error(f'Can not unmarshal JSON from {response.url}: {body[:200]}')
            raise BillingDecodeError(response.status_code, body)
        return data

import json
import logging

import pytest
import requests

from billing.client import BillingClient
from billing.conf import BillingConfig
from billing.exceptions import BillingDecodeError, BillingHTTPError
from billing.types import OrderCheckRequest, OrderRequest, PaymentRequest

ORDER_BODY = {
    'OrderId': 'ord-1',
    'PaymentUrl': 'https://pay.akouendy.com/p/tok-1',
    'PriceId': 'price-1',
    'AppId': 'app42',
    'PaymentToken': 'tok-1',
    'Description': 'created',
    'Code': '00',
}


@pytest.fixture
def client(billing_client):
    return billing_client


class TestRoutes:

    def test_create_order_posts_json(self, client, session):
        session.reply(201, ORDER_BODY)
        data = client.create_order(OrderRequest(customer_email='a@b.sn', price_id='price-1', app_id='app42'))

        sent = session.sent[0]
        assert sent.method == 'POST'
        assert sent.url == 'http://127.0.0.1:1180/v1/order/create'
        assert json.loads(sent.body)['CustomerEmail'] == 'a@b.sn'
        assert json.loads(sent.body)['PriceId'] == 'price-1'
        assert data == ORDER_BODY

    def test_check_order(self, client, session):
        session.reply(200, {'OrderId': 'ord-1', 'Status': 'SUCCESS'})
        client.check_order(OrderCheckRequest(order_id='ord-1', payment_token='tok-1'))
        sent = session.sent[0]
        assert sent.url == 'http://127.0.0.1:1180/v1/order/check'
        assert json.loads(sent.body) == {'OrderId': 'ord-1', 'PaymentToken': 'tok-1'}

    def test_init_payment(self, client, session):
        session.reply(200, {'PaymentId': 'pay-1'})
        client.init_payment(PaymentRequest(transaction_id='trx-001', total_amount='5000', hash='h'))
        sent = session.sent[0]
        assert sent.url == 'http://127.0.0.1:1180/v1/billing/payment/init'
        assert json.loads(sent.body)['Hash'] == 'h'

    def test_payment_status_is_a_get_without_body(self, client, session):
        session.reply(200, {'PaymentToken': 'tok 1', 'Status': 'PENDING'})
        client.payment_status('tok 1')
        sent = session.sent[0]
        assert sent.method == 'GET'
        assert sent.url == 'http://127.0.0.1:1180/v1/payment/tok%201'
        assert sent.body is None


class TestHeaders:

    def test_default_headers(self, client, session):
        session.reply(200, {})
        client.post('order/check', {})
        headers = session.sent[0].headers
        assert headers['Content-Type'] == 'application/json'
        assert headers['User-Agent'] == 'akouendy-billing-api-sdk/v1.0'

    def test_custom_user_agent(self, billing_config, session):
        client = BillingClient(billing_config, session=session, user_agent='shop/2.0')
        session.reply(200, {})
        client.post('order/check', {})
        assert session.sent[0].headers['User-Agent'] == 'shop/2.0'

    def test_session_headers_do_not_override_user_agent(self, client, session):
        session.headers['User-Agent'] = 'python-requests'
        session.reply(200, {})
        client.post('order/check', {})
        assert session.sent[0].headers['User-Agent'] == 'akouendy-billing-api-sdk/v1.0'

    def test_timeout_from_config(self, session):
        client = BillingClient(BillingConfig(timeout=7), session=session)
        session.reply(200, {})
        client.get('payment/x')
        assert session.timeouts == [7]


class TestEndpoint:

    def test_trailing_slash_added(self, session):
        client = BillingClient(BillingConfig(base_url='http://billing.local/api/v1'), session=session)
        assert client.endpoint == 'http://billing.local/api/v1/'
        assert client.url_for('/order/create') == 'http://billing.local/api/v1/order/create'


class TestErrors:

    def test_not_found_carries_body(self, client, session):
        session.reply(404, '{"error":"not found"}')
        with pytest.raises(BillingHTTPError) as exc_info:
            client.post('order/create', {})
        assert '{"error":"not found"}' in str(exc_info.value)
        assert exc_info.value.status_code == 404

    def test_server_error(self, client, session):
        session.reply(500, 'boom')
        with pytest.raises(BillingHTTPError, match='boom'):
            client.get('payment/x')

    def test_transport_error_propagates(self, client, session):
        session.fail(requests.ConnectionError('refused'))
        with pytest.raises(requests.ConnectionError):
            client.post('order/create', {})

    def test_invalid_json_on_success(self, client, session):
        session.reply(200, '<html>ok</html>')
        with pytest.raises(BillingDecodeError):
            client.post('order/create', {})

    def test_non_object_json_on_success(self, client, session):
        session.reply(200, '[1, 2]')
        with pytest.raises(BillingDecodeError):
            client.post('order/create', {})


class TestHooks:

    def test_request_before_can_mutate(self, billing_config, session):
        def add_auth(request):
            request.headers['Authorization'] = 'Bearer abc'

        client = BillingClient(billing_config, session=session, request_before=add_auth)
        session.reply(200, {})
        client.post('order/check', {})
        assert session.sent[0].headers['Authorization'] == 'Bearer abc'

    def test_request_before_failure_aborts(self, billing_config, session):
        def reject(request):
            raise RuntimeError('blocked')

        client = BillingClient(billing_config, session=session, request_before=reject)
        with pytest.raises(RuntimeError, match='blocked'):
            client.post('order/check', {})
        assert session.sent == []

    def test_response_after_sees_response(self, billing_config, session):
        seen = []
        client = BillingClient(billing_config, session=session, response_after=lambda r: seen.append(r.status_code))
        session.reply(201, {})
        client.post('order/create', {})
        assert seen == [201]

    def test_response_after_failure_aborts(self, billing_config, session):
        def reject(response):
            raise RuntimeError('audit failed')

        client = BillingClient(billing_config, session=session, response_after=reject)
        session.reply(200, {})
        with pytest.raises(RuntimeError, match='audit failed'):
            client.post('order/create', {})


class TestDebugDump:

    def test_dumps_when_debug(self, session, caplog):
        client = BillingClient(BillingConfig(debug=True), session=session)
        session.reply(200, {'OrderId': 'ord-1'})
        with caplog.at_level(logging.INFO, logger='billing.client'):
            client.post('order/create', {'PriceId': 'price-1'})
        assert 'DumpRequest = POST http://127.0.0.1:1180/v1/order/create' in caplog.text
        assert 'price-1' in caplog.text
        assert 'DumpResponse = HTTP 200' in caplog.text
        assert 'ord-1' in caplog.text

    def test_silent_without_debug(self, client, session, caplog):
        session.reply(200, {})
        with caplog.at_level(logging.INFO, logger='billing.client'):
            client.post('order/create', {})
        assert 'DumpRequest' not in caplog.text

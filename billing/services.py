"""
Billing Services
Orders and payments on the Akouendy billing API, mapped to local BillingTransaction records.

A record is written only when the service accepts the request (2xx with a JSON
body). Non-2xx answers raise BillingHTTPError and store nothing. A 2xx answer
that cannot be decoded raises BillingDecodeError, unless the client config has
legacy_silent_decode set: then the failure is only logged, an empty response
is returned and nothing is stored.
"""

import logging
from dataclasses import replace

from billing.exceptions import BillingDecodeError
from billing.models import BillingTransaction
from billing.repositories import BillingRepository
from billing.signature import sign_payment_request, validate_payment_webhook
from billing.types import (
    OrderCheckRequest, OrderResponse, OrderStatusResponse,
    PaymentResponse, PaymentStatusResponse, PaymentWebhook,
)

logger = logging.getLogger(__name__)


def _call(client, operation, *args):
    """Run a client call, applying the legacy decode policy. Returns None on a swallowed decode failure."""
    try:
        return operation(*args)
    except BillingDecodeError as e:
        if not client.config.legacy_silent_decode:
            raise
        logger.error(f'Can not unmarshal JSON, continuing with empty response: {e}')
        return None


def _with_callback(request, client, callback_url):
    if request.webhook or not client.config.app_base_url:
        return request
    return replace(request, webhook=callback_url)


# ==================== Orders ====================

def create_order(client, transaction_id, order, country=None, repository=None):
    """
    Open an order for the caller's transaction_id.
    Returns: (OrderResponse, BillingTransaction or None)
    """
    repository = repository or BillingRepository()
    config = client.config

    if not order.app_id:
        order = replace(order, app_id=config.app_id)
    order = _with_callback(order, client, config.order_webhook_url(transaction_id))

    data = _call(client, client.create_order, order)
    if data is None:
        return OrderResponse(), None

    response = OrderResponse.from_payload(data)
    transaction = BillingTransaction(
        app_trx_id=transaction_id,
        order_id=response.order_id,
        order_payment_token=response.payment_token,
        country=country or config.default_country,
    )
    repository.create_billing_transaction(transaction)
    logger.info(f'Order created: trx={transaction_id} order={response.order_id}')
    return response, transaction


def check_order(client, order_id, payment_token):
    """Ask the service for the current state of an order."""
    data = _call(client, client.check_order, OrderCheckRequest(order_id=order_id, payment_token=payment_token))
    if data is None:
        return OrderStatusResponse()
    return OrderStatusResponse.from_payload(data)


# ==================== Payments ====================

def initiate_payment(client, payment, country=None, repository=None):
    """
    Sign and send a payment initiation.
    Returns: (PaymentResponse, BillingTransaction or None)
    """
    repository = repository or BillingRepository()
    config = client.config
    country = country or payment.country or config.default_country

    signed = sign_payment_request(replace(payment, country=country), config)
    signed = _with_callback(signed, client, config.payment_webhook_url())

    data = _call(client, client.init_payment, signed)
    if data is None:
        return PaymentResponse(), None

    response = PaymentResponse.from_payload(data)
    transaction = BillingTransaction(
        app_trx_id=response.transaction_id or signed.transaction_id,
        payment_id=response.payment_id,
        order_payment_token=response.payment_token,
        country=country,
    )
    repository.create_billing_transaction(transaction)
    logger.info(f'Payment initiated: trx={transaction.app_trx_id} payment={response.payment_id}')
    return response, transaction


def get_payment_status(client, payment_token):
    data = _call(client, client.payment_status, payment_token)
    if data is None:
        return PaymentStatusResponse()
    return PaymentStatusResponse.from_payload(data)


# ==================== Webhooks ====================

def process_payment_webhook(payload, config):
    """
    Decode an inbound payment notification and check its signature.
    Returns: (PaymentWebhook, is_valid). Status must not be trusted unless is_valid.
    """
    webhook = PaymentWebhook.from_payload(payload)
    is_valid = validate_payment_webhook(webhook, config)
    logger.info(f'Payment webhook: trx={webhook.transaction_id}, status={webhook.status}, valid={is_valid}')
    return webhook, is_valid

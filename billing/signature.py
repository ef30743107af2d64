"""
Billing signatures.

Both directions use the same scheme: SHA-512 over the UTF-8 bytes of the
fields joined with '|', hex encoded in lowercase.

    webhook:         app_token | transaction_id | status
    payment request: app_id | transaction_id | total_amount | PAYMENT_SALT

Field order is part of the contract with the billing service.
"""

import binascii
import hashlib
import logging
from dataclasses import replace
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)

SEPARATOR = '|'
PAYMENT_SALT = 'akouna_matata'
DIGEST_SIZE = hashlib.sha512().digest_size


def hash512(text):
    return hashlib.sha512(text.encode('utf-8')).hexdigest()


def generate_signature(fields):
    """Digest of the fields in the order given, secret included by the caller."""
    return hash512(SEPARATOR.join(fields))


def _parse_amount(amount):
    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        raise ValueError(f'Invalid amount: {amount!r}')
    if not value.is_finite():
        raise ValueError(f'Invalid amount: {amount!r}')
    return value


def format_amount(amount):
    """TotalAmount as it appears in the signed text: '5000' for integral amounts, '12.5' otherwise."""
    value = _parse_amount(amount)
    if value == value.to_integral_value():
        return str(value.quantize(Decimal(1)))
    return format(value.normalize(), 'f')


def amount_value(amount):
    """TotalAmount as a JSON number: int when integral, float otherwise."""
    value = _parse_amount(amount)
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def validate_payment_webhook(webhook, config):
    # TODO: compare with hmac.compare_digest (constant time)
    expected = generate_signature([config.app_token, webhook.transaction_id, webhook.status])
    if expected == webhook.hash:
        return True
    logger.warning(f'Webhook signature mismatch for transaction {webhook.transaction_id}')
    return False


def payment_request_signature(app_id, transaction_id, total_amount, salt=PAYMENT_SALT):
    return generate_signature([app_id, transaction_id, format_amount(total_amount), salt])


def sign_payment_request(payment, config):
    """Return a copy of the payment request carrying AppId, a numeric TotalAmount and Hash."""
    app_id = payment.app_id or config.app_id
    return replace(
        payment,
        app_id=app_id,
        total_amount=amount_value(payment.total_amount),
        hash=payment_request_signature(app_id, payment.transaction_id, payment.total_amount),
    )


def signature_to_bytes(signature):
    try:
        digest = binascii.unhexlify(signature)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f'Invalid signature encoding: {e}')
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f'Signature must be {DIGEST_SIZE} bytes, got {len(digest)}')
    return digest


def signature_from_bytes(digest):
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f'Signature must be {DIGEST_SIZE} bytes, got {len(digest)}')
    return binascii.hexlify(digest).decode('ascii')

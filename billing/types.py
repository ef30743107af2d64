"""
Request and response shapes exchanged with the billing service.
JSON keys are the service's own (PascalCase); missing keys decode to ''.
PaymentRequest.TotalAmount is sent as a JSON number.
"""

from dataclasses import dataclass, field, fields
from enum import Enum


def _key(name):
    return field(default='', metadata={'json': name})


class PaymentStatus(str, Enum):
    SUCCESS = 'SUCCESS'


class WireModel:
    """Maps dataclass attributes to the service's JSON keys."""

    def to_payload(self):
        return {f.metadata['json']: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_payload(cls, data):
        values = {}
        for f in fields(cls):
            value = data.get(f.metadata['json'])
            if value is not None:
                values[f.name] = value if isinstance(value, str) else str(value)
        return cls(**values)


@dataclass
class OrderRequest(WireModel):
    customer_email: str = _key('CustomerEmail')
    customer_full_name: str = _key('CustomerFullName')
    customer_id: str = _key('CustomerId')
    billing_provider: str = _key('BillingProvider')
    price_id: str = _key('PriceId')
    app_id: str = _key('AppId')
    webhook: str = _key('Webhook')


@dataclass
class OrderResponse(WireModel):
    order_id: str = _key('OrderId')
    payment_url: str = _key('PaymentUrl')
    price_id: str = _key('PriceId')
    app_id: str = _key('AppId')
    payment_token: str = _key('PaymentToken')
    description: str = _key('Description')
    code: str = _key('Code')


@dataclass
class OrderCheckRequest(WireModel):
    order_id: str = _key('OrderId')
    payment_token: str = _key('PaymentToken')


@dataclass
class OrderStatusResponse(WireModel):
    order_id: str = _key('OrderId')
    payment_token: str = _key('PaymentToken')
    status: str = _key('Status')
    description: str = _key('Description')
    code: str = _key('Code')


@dataclass
class PaymentRequest(WireModel):
    app_id: str = _key('AppId')
    transaction_id: str = _key('TransactionId')
    total_amount: int = field(default=0, metadata={'json': 'TotalAmount'})
    description: str = _key('Description')
    customer_email: str = _key('CustomerEmail')
    customer_full_name: str = _key('CustomerFullName')
    customer_phone: str = _key('CustomerPhone')
    country: str = _key('Country')
    webhook: str = _key('Webhook')
    return_url: str = _key('ReturnUrl')
    hash: str = _key('Hash')


@dataclass
class PaymentResponse(WireModel):
    payment_id: str = _key('PaymentId')
    payment_token: str = _key('PaymentToken')
    payment_url: str = _key('PaymentUrl')
    transaction_id: str = _key('TransactionId')
    description: str = _key('Description')
    code: str = _key('Code')


@dataclass
class PaymentStatusResponse(WireModel):
    payment_token: str = _key('PaymentToken')
    transaction_id: str = _key('TransactionId')
    status: str = _key('Status')
    total_amount: str = _key('TotalAmount')
    description: str = _key('Description')
    code: str = _key('Code')

    @property
    def is_successful(self):
        return self.status == PaymentStatus.SUCCESS.value


@dataclass
class PaymentWebhook(WireModel):
    hash: str = _key('Hash')
    status: str = _key('Status')
    transaction_id: str = _key('TransactionID')

"""
Billing SDK configuration.
Built once at startup and handed to every component that needs it.
"""

import logging
from dataclasses import dataclass, replace

from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_ENV = 'sandbox'
DEFAULT_USER_AGENT = 'akouendy-billing-api-sdk/v1.0'
DEFAULT_COUNTRY = 'SEN'

ORDER_WEBHOOK_PATH = '/2021-10-01/billing-webhook/'
PAYMENT_WEBHOOK_PATH = '/2023-05-03/payment-webhook/'

BILLING_URL_MAP = {
    'sandbox': 'http://127.0.0.1:1180/v1',
    'prod': 'https://pay.akouendy.com/v1',
}


def resolve_billing_url(env):
    """Map an environment name to its base URL, falling back to sandbox."""
    billing_url = BILLING_URL_MAP.get(env)
    if billing_url is None:
        logger.warning(f'Unknown billing environment {env!r}, using {DEFAULT_ENV}')
        return DEFAULT_ENV, BILLING_URL_MAP[DEFAULT_ENV]
    return env, billing_url


@dataclass(frozen=True)
class BillingConfig:
    app_id: str = ''
    app_token: str = ''
    env: str = DEFAULT_ENV
    app_base_url: str = ''
    debug: bool = False
    user_agent: str = DEFAULT_USER_AGENT
    default_country: str = DEFAULT_COUNTRY
    timeout: float = 30
    legacy_silent_decode: bool = False
    base_url: str = ''

    def __post_init__(self):
        env, billing_url = resolve_billing_url(self.env)
        object.__setattr__(self, 'env', env)
        if not self.base_url:
            object.__setattr__(self, 'base_url', billing_url)

    @classmethod
    def from_settings(cls):
        """Read BILLING_* values from Django settings."""
        return cls(
            app_id=getattr(settings, 'BILLING_APP_ID', '') or '',
            app_token=getattr(settings, 'BILLING_APP_TOKEN', '') or '',
            env=getattr(settings, 'BILLING_ENV', DEFAULT_ENV) or DEFAULT_ENV,
            app_base_url=getattr(settings, 'BILLING_APP_BASE_URL', '') or '',
            debug=bool(getattr(settings, 'BILLING_DEBUG', False)),
            user_agent=getattr(settings, 'BILLING_USER_AGENT', '') or DEFAULT_USER_AGENT,
            default_country=getattr(settings, 'BILLING_DEFAULT_COUNTRY', '') or DEFAULT_COUNTRY,
            timeout=getattr(settings, 'BILLING_TIMEOUT', 30),
            legacy_silent_decode=bool(getattr(settings, 'BILLING_LEGACY_SILENT_DECODE', False)),
        )

    def with_options(self, **changes):
        return replace(self, **changes)

    def order_webhook_url(self, transaction_id):
        """Callback URL the billing service notifies for an order."""
        return f'{self.app_base_url.rstrip("/")}{ORDER_WEBHOOK_PATH}{transaction_id}'

    def payment_webhook_url(self):
        """Callback URL the billing service notifies for payments; the transaction id travels in the payload."""
        return f'{self.app_base_url.rstrip("/")}{PAYMENT_WEBHOOK_PATH}'

from django.db import models

from billing.conf import DEFAULT_COUNTRY


class BillingTransaction(models.Model):
    """
    Local trace of an order or payment opened on the billing service.
    app_trx_id is the caller's own transaction id; the rest comes from the service.
    Written once when the service accepts the request, never updated here.
    """
    app_trx_id = models.CharField(max_length=100, db_index=True)
    order_id = models.CharField(max_length=100, blank=True, default='')
    order_payment_token = models.CharField(max_length=255, blank=True, default='', db_index=True)
    payment_id = models.CharField(max_length=100, blank=True, default='')
    country = models.CharField(max_length=3, default=DEFAULT_COUNTRY, help_text='ISO-3166 alpha-3')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f'BillingTransaction {self.app_trx_id} - {self.order_payment_token or "no token"}'


def migrate_models():
    """Models the host project must migrate for this SDK."""
    return [BillingTransaction]

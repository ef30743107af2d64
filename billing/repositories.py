import logging

from billing.models import BillingTransaction

logger = logging.getLogger(__name__)


class BillingRepository:
    """ORM access for BillingTransaction. Storage errors propagate to the caller."""

    def create_billing_transaction(self, transaction):
        transaction.save(force_insert=True)
        logger.info(f'Billing transaction stored: {transaction.app_trx_id} token={transaction.order_payment_token}')
        return transaction

    def get_by_payment_token(self, payment_token):
        return self._first(order_payment_token=payment_token)

    def get_by_transaction_id(self, transaction_id):
        return self._first(app_trx_id=transaction_id)

    def exists_for_transaction_id(self, transaction_id):
        return BillingTransaction.objects.filter(app_trx_id=transaction_id).exists()

    def _first(self, **lookup):
        # oldest record wins when the service reuses an identifier
        transaction = BillingTransaction.objects.filter(**lookup).order_by('id').first()
        if transaction is None:
            raise BillingTransaction.DoesNotExist(f'No billing transaction matching {lookup}')
        return transaction

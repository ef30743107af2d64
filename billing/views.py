"""
Inbound webhook from the billing service.
The payload is checked against the shared app token before its Status is trusted.
"""

import json
import logging

from django.apps import apps
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from billing.repositories import BillingRepository
from billing.services import process_payment_webhook

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def payment_webhook(request):
    """Handle Akouendy payment notifications."""
    try:
        data = json.loads(request.body)
    except ValueError:
        logger.warning('Billing webhook with invalid JSON body')
        return JsonResponse({'error': 'Invalid JSON'}, status=400)

    if not isinstance(data, dict) or not data.get('TransactionID'):
        return JsonResponse({'error': 'Missing TransactionID'}, status=400)

    config = apps.get_app_config('billing').billing_config
    webhook, is_valid = process_payment_webhook(data, config)
    if not is_valid:
        return JsonResponse({'error': 'Invalid signature'}, status=400)

    known = BillingRepository().exists_for_transaction_id(webhook.transaction_id)
    if not known:
        logger.warning(f'Billing webhook for unknown transaction: {webhook.transaction_id}')

    return JsonResponse({
        'status': webhook.status,
        'transaction_id': webhook.transaction_id,
        'known': known,
    })

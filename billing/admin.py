from django.contrib import admin
from billing.models import BillingTransaction


@admin.register(BillingTransaction)
class BillingTransactionAdmin(admin.ModelAdmin):
    list_display = ['app_trx_id', 'order_id', 'order_payment_token', 'payment_id', 'country', 'created_at']
    list_filter = ['country']
    search_fields = ['app_trx_id', 'order_id', 'order_payment_token']
    readonly_fields = ['app_trx_id', 'order_id', 'order_payment_token', 'payment_id', 'country',
                       'created_at', 'updated_at']

    def has_add_permission(self, request):
        return False

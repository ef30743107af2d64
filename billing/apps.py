from django.apps import AppConfig


class BillingAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'billing'
    verbose_name = 'Billing'

    def ready(self):
        from billing.conf import BillingConfig
        # read once; components receive this object explicitly
        self.billing_config = BillingConfig.from_settings()

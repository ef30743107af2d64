from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='BillingTransaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('app_trx_id', models.CharField(db_index=True, max_length=100)),
                ('order_id', models.CharField(blank=True, default='', max_length=100)),
                ('order_payment_token', models.CharField(blank=True, db_index=True, default='', max_length=255)),
                ('payment_id', models.CharField(blank=True, default='', max_length=100)),
                ('country', models.CharField(default='SEN', help_text='ISO-3166 alpha-3', max_length=3)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-created_at'],
            },
        ),
    ]

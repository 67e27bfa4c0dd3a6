# Initial migration for sales and expenses

import uuid
from decimal import Decimal
import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='SalesRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True, help_text='Timestamp when the record was last updated')),
                ('date', models.DateField(db_index=True, help_text='Date the activity took place')),
                ('notes', models.TextField(blank=True, default='')),
                ('product_type', models.CharField(choices=[('Eggs', 'Eggs'), ('Birds', 'Birds'), ('Manure', 'Manure'), ('Other', 'Other')], db_index=True, max_length=20)),
                ('quantity', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('unit_price', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('customer_name', models.CharField(blank=True, default='', max_length=100)),
                ('customer_phone', models.CharField(blank=True, default='', max_length=20)),
                ('recorded_by', models.ForeignKey(blank=True, help_text='User who entered the record', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'sales_records',
                'ordering': ['-date', '-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Expense',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True, help_text='Timestamp when the record was last updated')),
                ('date', models.DateField(db_index=True, help_text='Date the activity took place')),
                ('notes', models.TextField(blank=True, default='')),
                ('category', models.CharField(choices=[('Feed', 'Feed'), ('Medicine', 'Medicine'), ('Labor', 'Labor'), ('Equipment', 'Equipment'), ('Utilities', 'Utilities'), ('Maintenance', 'Maintenance'), ('Other', 'Other')], db_index=True, max_length=20)),
                ('description', models.CharField(max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('recorded_by', models.ForeignKey(blank=True, help_text='User who entered the record', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'expenses',
                'ordering': ['-date', '-created_at'],
                'abstract': False,
            },
        ),
    ]

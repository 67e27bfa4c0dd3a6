# Initial migration for inventory items

import uuid
from decimal import Decimal
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='InventoryItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True, help_text='Timestamp when the record was last updated')),
                ('item_name', models.CharField(max_length=100)),
                ('item_type', models.CharField(choices=[('Feed', 'Feed'), ('Medicine', 'Medicine'), ('Equipment', 'Equipment'), ('Other', 'Other')], db_index=True, max_length=20)),
                ('quantity', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('unit', models.CharField(default='kg', max_length=20)),
                ('minimum_stock', models.DecimalField(decimal_places=2, default=Decimal('10'), help_text='Quantity at or below which the item is low on stock', max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('unit_price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('supplier', models.CharField(blank=True, default='', max_length=100)),
            ],
            options={
                'db_table': 'inventory',
                'ordering': ['-updated_at'],
            },
        ),
    ]

# Initial migration for poultry batches

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PoultryBatch',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True, help_text='Timestamp when the record was last updated')),
                ('breed', models.CharField(help_text='Breed, e.g. Layer, Broiler, Kienyeji', max_length=100)),
                ('quantity', models.PositiveIntegerField(help_text='Live bird count')),
                ('age', models.PositiveIntegerField(help_text='Age in weeks')),
                ('date_acquired', models.DateField(help_text='Date the batch arrived on the farm')),
                ('housing_unit', models.CharField(blank=True, db_index=True, default='', max_length=100)),
                ('status', models.CharField(choices=[('Active', 'Active'), ('Sold', 'Sold'), ('Deceased', 'Deceased'), ('Inactive', 'Inactive')], db_index=True, default='Active', max_length=20)),
            ],
            options={
                'verbose_name': 'poultry batch',
                'verbose_name_plural': 'poultry batches',
                'db_table': 'poultry_batches',
                'ordering': ['-created_at'],
            },
        ),
    ]

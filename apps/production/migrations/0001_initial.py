# Initial migration for production records

import uuid
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('flocks', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ProductionRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True, help_text='Timestamp when the record was last updated')),
                ('date', models.DateField(db_index=True, help_text='Date the activity took place')),
                ('eggs_collected', models.PositiveIntegerField()),
                ('mortality_count', models.PositiveIntegerField(default=0)),
                ('notes', models.TextField(blank=True, default='')),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='production_records', to='flocks.poultrybatch')),
                ('recorded_by', models.ForeignKey(blank=True, help_text='User who entered the record', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'production_records',
                'ordering': ['-date', '-created_at'],
                'abstract': False,
                'indexes': [models.Index(fields=['batch', 'date'], name='production_batch_date_idx')],
            },
        ),
    ]

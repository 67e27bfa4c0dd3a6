# Initial migration for health records

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
            name='HealthRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True, help_text='Timestamp when the record was last updated')),
                ('vaccination_date', models.DateField(blank=True, db_index=True, null=True)),
                ('vaccine_name', models.CharField(blank=True, default='', max_length=100)),
                ('disease', models.CharField(blank=True, default='', max_length=100)),
                ('treatment', models.TextField(blank=True, default='')),
                ('status', models.CharField(choices=[('Healthy', 'Healthy'), ('Under Treatment', 'Under Treatment'), ('Quarantined', 'Quarantined'), ('Recovered', 'Recovered')], db_index=True, default='Healthy', max_length=20)),
                ('notes', models.TextField(blank=True, default='')),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='health_records', to='flocks.poultrybatch')),
                ('vet', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'health_records',
                'ordering': ['-created_at'],
            },
        ),
    ]

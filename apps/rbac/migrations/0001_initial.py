# Initial migration for the users table

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, help_text='Unique identifier', primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, help_text='Timestamp when the record was created')),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True, help_text='Timestamp when the record was last updated')),
                ('name', models.CharField(help_text='Display name', max_length=150)),
                ('email', models.EmailField(help_text='User email address (unique, stored lower case)', max_length=254, unique=True)),
                ('password_hash', models.CharField(db_column='password_hash', help_text='Hashed password', max_length=255)),
                ('role', models.CharField(choices=[('Admin', 'Admin'), ('Manager', 'Manager'), ('Worker', 'Worker'), ('Veterinarian', 'Veterinarian')], db_index=True, default='Worker', help_text='Role deciding page access and record grants', max_length=20)),
                ('phone', models.CharField(blank=True, default='', help_text='Contact phone number', max_length=32)),
                ('is_active', models.BooleanField(db_index=True, default=True, help_text='Whether user account is active')),
                ('is_superuser', models.BooleanField(default=False, help_text='Django admin access')),
                ('last_login_at', models.DateTimeField(blank=True, help_text='Last login timestamp', null=True)),
            ],
            options={
                'db_table': 'users',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['is_active', 'created_at'], name='users_active_created_idx')],
            },
        ),
    ]

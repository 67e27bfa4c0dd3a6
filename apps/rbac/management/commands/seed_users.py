"""
Management command to create the default farm accounts.

Creates one Admin, Manager, Worker and Veterinarian account when the user
table is empty, so a fresh install can log in immediately.
"""
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.rbac.models import User, Role


DEFAULT_USERS = [
    {'name': 'Farm Admin', 'email': 'admin@poultryfarm.com', 'role': Role.ADMIN, 'phone': '1234567890'},
    {'name': 'Farm Manager', 'email': 'manager@poultryfarm.com', 'role': Role.MANAGER, 'phone': '1234567891'},
    {'name': 'Farm Worker', 'email': 'worker@poultryfarm.com', 'role': Role.WORKER, 'phone': '1234567892'},
    {'name': 'Dr. Veterinarian', 'email': 'vet@poultryfarm.com', 'role': Role.VETERINARIAN, 'phone': '1234567893'},
]


class Command(BaseCommand):
    help = 'Create default Admin, Manager, Worker and Veterinarian accounts'

    def add_arguments(self, parser):
        parser.add_argument(
            '--password',
            type=str,
            help='Password for every seeded account (default: SEED_USER_PASSWORD)',
        )
        parser.add_argument(
            '--force',
            action='store_true',
            help='Seed even when users already exist (existing emails are skipped)',
        )

    def handle(self, *args, **options):
        password = options.get('password') or getattr(settings, 'SEED_USER_PASSWORD', None)

        if not password and not settings.DEBUG:
            raise CommandError(
                'A password is required outside DEBUG: pass --password or set SEED_USER_PASSWORD'
            )

        if User.objects.exists() and not options['force']:
            self.stdout.write(self.style.WARNING('Users already exist; nothing seeded (use --force)'))
            return

        created = 0
        with transaction.atomic():
            for account in DEFAULT_USERS:
                if User.objects.filter(email=account['email']).exists():
                    self.stdout.write(f"  - {account['email']} exists, skipped")
                    continue

                # Development default: <local part>123, e.g. admin123
                user_password = password or f"{account['email'].split('@')[0]}123"
                User.objects.create_user(
                    email=account['email'],
                    password=user_password,
                    name=account['name'],
                    role=account['role'],
                    phone=account['phone'],
                    is_superuser=account['role'] == Role.ADMIN,
                )
                created += 1
                self.stdout.write(f"  ✓ {account['role']}: {account['email']}")

        self.stdout.write(self.style.SUCCESS(f'Seeded {created} user(s)'))

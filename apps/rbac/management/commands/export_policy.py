"""
Management command to write the RBAC policy as JSON.

The frontend build reads this file so its route guards and action buttons
use the same tables the API enforces.
"""
import json
from django.core.management.base import BaseCommand

from apps.rbac.policy import POLICY


class Command(BaseCommand):
    help = 'Export the RBAC route and action tables as JSON'

    def add_arguments(self, parser):
        parser.add_argument(
            '--output',
            type=str,
            help='File to write (default: stdout)',
        )
        parser.add_argument(
            '--indent',
            type=int,
            default=2,
        )

    def handle(self, *args, **options):
        document = json.dumps(POLICY.as_dict(), indent=options['indent'], sort_keys=True)

        if not options.get('output'):
            self.stdout.write(document)
            return

        with open(options['output'], 'w', encoding='utf-8') as fh:
            fh.write(document + '\n')

        self.stdout.write(self.style.SUCCESS(
            f"Wrote policy v{POLICY.version} to {options['output']}"
        ))

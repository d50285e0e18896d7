from django.core.management.base import BaseCommand
from api.storage import get_value, write_json_array
from adminpanel.conf import panel_setting
from adminpanel.sample_data import SAMPLE_FEEDBACK, SAMPLE_SHOPS


class Command(BaseCommand):
    help = 'Write sample shops and feedback into the admin panel storage keys'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Overwrite keys that already hold a value',
        )

    def handle(self, *args, **options):
        seeds = [
            (panel_setting('USERS_KEY'), SAMPLE_SHOPS),
            (panel_setting('FEEDBACK_KEY'), SAMPLE_FEEDBACK),
        ]

        for key, records in seeds:
            if get_value(key) and not options['force']:
                self.stdout.write(f"Skipping '{key}': already has a value (use --force to overwrite)")
                continue
            write_json_array(key, records)
            self.stdout.write(f"Wrote {len(records)} records to '{key}'")

        self.stdout.write(self.style.SUCCESS('Admin panel storage seeded'))

"""Management command to import Pakistani provinces, districts and tehsils from JSON."""
import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.common.core.exceptions import InvalidLocationData, LocationFileNotFound
from apps.common.locations.selectors import LocationSelector
from apps.common.locations.services import LocationImportService

logger = logging.getLogger('apps.locations')


class Command(BaseCommand):
    help = 'Import provinces, districts, and tehsils from pakistan-provinces-districts-tehsils.json'

    def add_arguments(self, parser):
        parser.add_argument(
            '--file',
            help='Path to the JSON data file (default: settings.LOCATION_DATA_FILE)',
        )
        parser.add_argument(
            '--backup-dir',
            help='Directory for the pre-import backup (default: settings.LOCATION_BACKUP_DIR)',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what the file contains without touching the database',
        )
        parser.add_argument(
            '--stats',
            action='store_true',
            help='Show current database statistics',
        )

    def handle(self, *args, **options):
        # Show stats if requested
        if options['stats']:
            self.write_stats('Current database')
            return

        path = options['file'] or settings.LOCATION_DATA_FILE
        backup_dir = options['backup_dir'] or settings.LOCATION_BACKUP_DIR
        service = LocationImportService()

        self.stdout.write(self.style.NOTICE(f'Starting import from {path}...'))

        try:
            if options['dry_run']:
                self.stdout.write(self.style.WARNING('DRY RUN - No data will be saved'))
                provinces = service.load_location_file(path)
                districts = [d for p in provinces for d in (p.get('districts') or [])]
                tehsil_count = sum(len(d.get('tehsils') or []) for d in districts)

                self.stdout.write(f"Found {len(provinces)} provinces")
                self.stdout.write(f"Found {len(districts)} districts")
                self.stdout.write(f"Found {tehsil_count} tehsils")
                self.stdout.write(self.style.SUCCESS('Dry run completed. Use without --dry-run to import.'))
                return

            counts = service.run(path, backup_dir)
        except (LocationFileNotFound, InvalidLocationData) as e:
            logger.error(f"Location import aborted: {e}")
            raise CommandError(e.message)

        self.stdout.write(self.style.SUCCESS(
            f"Successfully imported: "
            f"{counts['provinces']['created']} provinces, "
            f"{counts['districts']['created']} districts, "
            f"{counts['tehsils']['created']} tehsils"
        ))
        self.stdout.write(
            f"Reused: "
            f"{counts['provinces']['reused']} provinces, "
            f"{counts['districts']['reused']} districts; "
            f"skipped {counts['tehsils']['skipped']} tehsils"
        )

        # Show final stats
        self.write_stats('Total in database')

    def write_stats(self, label: str):
        stats = LocationSelector.get_statistics()
        self.stdout.write(self.style.SUCCESS(
            f"{label}: "
            f"{stats['provinces']} provinces, "
            f"{stats['districts']} districts, "
            f"{stats['tehsils']} tehsils"
        ))

"""Management command to run image recognition on stored files."""

import logging
from typing import Any, Final

from django.core.management.base import BaseCommand, CommandError

from server.apps.files.models import File
from server.apps.recognition.slots import FileProcessor

_DEFAULT_BATCH_SIZE: Final = 1000

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Send stored files through the upload file processor."""

    help = 'Run image recognition on files that are already in storage'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show which files would be sent without calling the API',
        )
        parser.add_argument(
            '--batch-size',
            type=int,
            default=_DEFAULT_BATCH_SIZE,
            help=f'Max files to process (default: {_DEFAULT_BATCH_SIZE})',
        )
        parser.add_argument(
            '--file-id',
            type=int,
            default=None,
            help='Process only the file with this ID',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the recognition command.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        dry_run = options['dry_run']
        files = File.objects.order_by('id')
        if options['file_id'] is not None:
            files = files.filter(id=options['file_id'])
            if not files.exists():
                raise CommandError(f'File {options["file_id"]} does not exist')
        files = files[:options['batch_size']]

        processor = FileProcessor()
        sent = 0
        skipped = 0

        for file_instance in files:
            if dry_run:
                accepted = processor.is_valid_image(file_instance)
            else:
                accepted = processor.process_file(file_instance)

            if not accepted:
                skipped += 1
                continue

            if dry_run:
                self.stdout.write(
                    f'Would recognize: {file_instance.file.name} '
                    f'(ID: {file_instance.id})',
                )
            else:
                logger.info(
                    'Recognition requested for file: %s (ID: %d)',
                    file_instance.file.name,
                    file_instance.id,
                )
            sent += 1

        if dry_run:
            self.stdout.write(
                self.style.SUCCESS(
                    f'Would send {sent} files to recognition, {skipped} skipped',
                ),
            )
        else:
            self.stdout.write(
                self.style.SUCCESS(
                    f'Sent {sent} files to recognition, {skipped} skipped',
                ),
            )

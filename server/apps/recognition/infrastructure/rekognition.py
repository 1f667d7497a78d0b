"""Amazon Rekognition client for uploaded images."""

import logging
from typing import Any

import boto3
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError
from django.db import transaction

from server.apps.files.models import File
from server.apps.recognition.configuration import (
    get_max_labels,
    get_min_confidence,
    get_region_name,
)
from server.apps.recognition.models import RecognitionLabel

logger = logging.getLogger(__name__)


class AmazonRekognition:
    """Detect objects and scenes in stored images with Amazon Rekognition.

    Failures of the remote call are logged and dropped: the caller never
    sees an exception from the service, it gets an empty result instead.
    """

    def __init__(self, client: BaseClient | None = None) -> None:
        """Initialize the client wrapper.

        Args:
            client: boto3 'rekognition' client. A new one for the
                configured region is created when omitted.
        """
        if client is None:
            client = boto3.client(
                'rekognition',
                region_name=get_region_name(),
            )
        self.client = client

    def process_image(self, file: File) -> list[RecognitionLabel]:
        """Detect labels for an image and store them on the file.

        Args:
            file: Stored file that passed the input policy.

        Returns:
            Labels stored for the file, empty if recognition failed.
        """
        logger.info(
            'Sending image to Amazon Rekognition: %s (ID: %d)',
            file.file.name,
            file.id,
        )

        try:
            image_bytes = file.read_content()
            response = self.client.detect_labels(
                Image={'Bytes': image_bytes},
                MaxLabels=get_max_labels(),
                MinConfidence=get_min_confidence(),
            )
        except (BotoCoreError, ClientError, OSError):
            logger.exception(
                'Image recognition failed: %s (ID: %d)',
                file.file.name,
                file.id,
            )
            return []

        labels = self._store_labels(file, response.get('Labels', []))
        logger.info(
            'Stored %d labels for file: %s (model version: %s)',
            len(labels),
            file.file.name,
            response.get('LabelModelVersion', 'unknown'),
        )
        return labels

    def _store_labels(
        self,
        file: File,
        detected: list[dict[str, Any]],
    ) -> list[RecognitionLabel]:
        labels: dict[str, RecognitionLabel] = {}
        for label in detected:
            name = label.get('Name')
            if not name or name in labels:
                continue
            labels[name] = RecognitionLabel(
                file=file,
                name=name,
                confidence=label.get('Confidence', 0),
                parents=[
                    parent['Name']
                    for parent in label.get('Parents', [])
                    if parent.get('Name')
                ],
            )

        with transaction.atomic():
            RecognitionLabel.objects.filter(file=file).delete()
            return RecognitionLabel.objects.bulk_create(labels.values())

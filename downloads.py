"""Where rendered presentations are written and how clients download them."""

import io
import logging
import re
import time
from pathlib import Path
from typing import Optional

from google.cloud import storage

from config import Settings

PPTX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
DOWNLOADS_URL_PREFIX = "/downloads"
MAX_TOPIC_STEM = 100 # keeps filenames under the 255-byte filesystem limit


def sanitize_topic(topic: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "_", topic or "")[:MAX_TOPIC_STEM]


def build_filename(topic: str, slide_count: Optional[int] = None, timestamp: Optional[int] = None) -> str:
    """Returns '<topic>_<n>slides_<ts>.pptx', or '<topic>_edited_<ts>.pptx' when no count is given."""
    if timestamp is None:
        timestamp = time.time_ns() // 1000 # microseconds keep concurrent writes apart
    label = f"{slide_count}slides" if slide_count is not None else "edited"
    return f"{sanitize_topic(topic)}_{label}_{timestamp}.pptx"


class LocalPresentationStore:
    """Writes files into the statically served downloads directory."""

    def __init__(self, downloads_dir: Path, url_prefix: str = DOWNLOADS_URL_PREFIX):
        self.downloads_dir = Path(downloads_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.downloads_dir.mkdir(parents=True, exist_ok=True)

    def save(self, presentation, filename: str) -> str:
        filepath = self.downloads_dir / filename
        presentation.save(str(filepath))
        logging.info(f"Saved presentation to {filepath}")
        return f"{self.url_prefix}/{filename}"


class GCSPresentationStore:
    """Uploads files to a Cloud Storage bucket and hands back the public URL."""

    def __init__(self, bucket_name: str, client=None):
        self.bucket_name = bucket_name
        self._client = client

    def save(self, presentation, filename: str) -> str:
        buffer = io.BytesIO()
        presentation.save(buffer)
        buffer.seek(0)

        client = self._client or storage.Client()
        bucket = client.bucket(self.bucket_name)
        blob = bucket.blob(filename)

        logging.info(f"Uploading presentation to gs://{self.bucket_name}/{filename}")
        blob.upload_from_string(buffer.getvalue(), content_type=PPTX_CONTENT_TYPE)
        logging.info(f"File uploaded. Public URL: {blob.public_url}")
        return blob.public_url


def build_store(settings: Settings):
    if settings.gcs_bucket_name:
        return GCSPresentationStore(settings.gcs_bucket_name)
    return LocalPresentationStore(settings.downloads_dir)

"""Tests for output filenames and presentation stores."""
from unittest.mock import MagicMock

from downloads import (
    MAX_TOPIC_STEM,
    PPTX_CONTENT_TYPE,
    GCSPresentationStore,
    LocalPresentationStore,
    build_filename,
    build_store,
    sanitize_topic,
)
from ppt_generator import create_presentation
from models import make_content_slide, make_title_slide

from conftest import make_settings


def small_deck():
    return create_presentation(
        [make_title_slide("topic"), make_content_slide("Heading", ["Bullet"])], "professional", "topic"
    )


class TestFilenames:
    def test_sanitize_topic(self):
        assert sanitize_topic("Apriori: a/b test!") == "Apriori__a_b_test_"

    def test_generated_filename(self):
        assert build_filename("urban beekeeping", 5, timestamp=123) == "urban_beekeeping_5slides_123.pptx"

    def test_edited_filename(self):
        assert build_filename("urban beekeeping", timestamp=123) == "urban_beekeeping_edited_123.pptx"

    def test_long_topic_stem_is_capped(self):
        name = build_filename("b" * 300, 20)
        assert name.startswith("b" * MAX_TOPIC_STEM + "_20slides_")
        assert len(name.encode()) < 255

    def test_default_timestamps_are_numeric(self):
        name = build_filename("topic", 3)
        assert name.startswith("topic_3slides_")
        assert name[len("topic_3slides_"):-len(".pptx")].isdigit()


class TestLocalStore:
    def test_save_writes_file_and_returns_url(self, tmp_path):
        store = LocalPresentationStore(tmp_path / "out")
        url = store.save(small_deck(), "deck.pptx")
        assert url == "/downloads/deck.pptx"
        assert (tmp_path / "out" / "deck.pptx").stat().st_size > 0


class TestGCSStore:
    def test_upload(self):
        client = MagicMock()
        blob = client.bucket.return_value.blob.return_value
        blob.public_url = "https://storage.googleapis.com/bucket/deck.pptx"

        url = GCSPresentationStore("bucket", client=client).save(small_deck(), "deck.pptx")

        assert url == "https://storage.googleapis.com/bucket/deck.pptx"
        client.bucket.assert_called_once_with("bucket")
        client.bucket.return_value.blob.assert_called_once_with("deck.pptx")
        data = blob.upload_from_string.call_args.args[0]
        assert data[:2] == b"PK"
        assert blob.upload_from_string.call_args.kwargs["content_type"] == PPTX_CONTENT_TYPE


class TestBuildStore:
    def test_local_by_default(self, tmp_path):
        assert isinstance(build_store(make_settings(downloads_dir=tmp_path)), LocalPresentationStore)

    def test_gcs_when_bucket_configured(self):
        assert isinstance(build_store(make_settings(gcs_bucket_name="bucket")), GCSPresentationStore)

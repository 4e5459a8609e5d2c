"""Shared pytest configuration: project root on sys.path, offline settings, fake Gemini clients."""
import os
import sys
import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest

# Ensure the project root is on sys.path so `import main` works
# regardless of where pytest is invoked from.
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# main.py reads settings at import time; keep tests offline and out of the repo tree.
os.environ["DOWNLOADS_DIR"] = tempfile.mkdtemp(prefix="deck-downloads-")
os.environ["GEMINI_API_KEY"] = ""
os.environ.pop("GCS_BUCKET_NAME", None)
os.environ.pop("GOOGLE_GENAI_USE_VERTEXAI", None)

from config import Settings  # noqa: E402

VALID_KEY = "AIza" + "x" * 35


def make_settings(**overrides) -> Settings:
    values = dict(
        gemini_api_key=VALID_KEY,
        gemini_model="gemini-test",
        use_vertexai=False,
        google_cloud_project=None,
        google_cloud_location=None,
        gcs_bucket_name=None,
        downloads_dir=Path(os.environ["DOWNLOADS_DIR"]),
        request_timeout_seconds=5.0,
        temperature=0.7,
        max_output_tokens=4000,
        top_p=0.9,
        log_level="INFO",
        cors_origins=("*",),
    )
    values.update(overrides)
    return Settings(**values)


class FakeModels:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return SimpleNamespace(text=response)


class FakeGenaiClient:
    """Stands in for google.genai.Client: ``models.generate_content`` replays canned responses."""

    def __init__(self, *responses):
        self.models = FakeModels(responses or ["ok"])


def make_bullet(n: int, topic: str = "the topic") -> str:
    return (
        f"Point {n} about {topic} explains a specific detail with enough supporting context "
        f"to pass the quality floor for generated bullets."
    )


def make_response(count: int, bullets_per_slide: int = 4, topic: str = "the topic") -> str:
    blocks = []
    for i in range(count):
        lines = [f"SLIDE {i + 2}: CONTENT", f"Title: Distinct Slide Heading Number {i + 1}"]
        lines.extend(f"• {make_bullet(j + 1, topic)}" for j in range(bullets_per_slide))
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def fake_genai():
    return FakeGenaiClient

import asyncio
import os
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

# Local imports
import ppt_generator
from config import load_settings
from downloads import build_filename, build_store
from errors import InvalidInput, RenderFailure
from gemini_client import ApiKeyStatus, GeminiClient
from models import Slide, TopicSummary
from orchestrator import GEMINI_AI_SUCCESS, PresentationOrchestrator
from themes import list_themes, resolve_theme_id


# --- Configuration ---
settings = load_settings()

# Logging configuration
logging.basicConfig(level=settings.log_level)

settings.downloads_dir.mkdir(parents=True, exist_ok=True)

gemini_client = GeminiClient(settings)
orchestrator = PresentationOrchestrator(gemini_client)
presentation_store = build_store(settings)


# --- Pydantic Models for API ---
class GeneratePayload(BaseModel):
    topic: Optional[str] = None
    slideCount: Optional[int] = None
    theme: Optional[str] = None
    moreInfoMode: bool = False


class RegeneratePayload(BaseModel):
    slides: Optional[List[Slide]] = None
    theme: Optional[str] = None
    topic: str = "presentation"
    topicSummary: Optional[TopicSummary] = None


# --- Dependencies ---
def get_orchestrator() -> PresentationOrchestrator:
    return orchestrator


def get_presentation_store():
    return presentation_store


def get_gemini_client() -> GeminiClient:
    return gemini_client


# --- FastAPI App ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Verify once at startup; requests fall back to template content until this succeeds.
    await asyncio.to_thread(gemini_client.verify)
    logging.info(f"Gemini API Status: {gemini_client.status.value}")
    yield


app = FastAPI(
    title="AI PowerPoint Generation Service",
    description="Generates PowerPoint decks from a topic with Gemini, falling back to template content.",
    version="1.0.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount("/downloads", StaticFiles(directory=str(settings.downloads_dir)), name="downloads")


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logging.warning(f"Rejected request body: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.exception_handler(RenderFailure)
async def render_failure_handler(request: Request, exc: RenderFailure):
    return JSONResponse(status_code=500, content={"error": str(exc)})


def render_and_store(slides: List[Slide], theme: str, topic: str, topic_summary: Optional[TopicSummary],
                     filename: str, store, failure_message: str) -> str:
    """Renders the deck and hands it to the store, returning the download URL."""
    try:
        presentation_object = ppt_generator.create_presentation(slides, theme, topic, topic_summary)
        return store.save(presentation_object, filename)
    except Exception as e:
        logging.error(f"An error occurred while rendering '{filename}': {e}", exc_info=True)
        raise RenderFailure(failure_message) from e


# --- Endpoints --- #
@app.get("/")
async def root(client: GeminiClient = Depends(get_gemini_client)):
    api_ready = client.status == ApiKeyStatus.VALID
    return {
        "message": "AI PowerPoint Generator is running.",
        "status": "GEMINI_INTEGRATION" if api_ready else "TEMPLATE_FALLBACK",
        "apiStatus": client.status.value,
        "features": [
            "Gemini generation with startup verification",
            "Topic-specific content libraries",
            "Template fallback when the API is unavailable",
            "Editable slides with re-rendering",
            "3-20 slides with selectable themes",
        ],
        "recommendation": "Optimal generation active" if api_ready else "Using high-quality fallback system",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/api/themes")
async def themes():
    return {"success": True, "themes": list_themes()}


@app.post("/api/generate-presentation", summary="Generate a PowerPoint deck from a topic")
def generate_presentation(
    payload: GeneratePayload,
    orchestrator: PresentationOrchestrator = Depends(get_orchestrator),
    store=Depends(get_presentation_store),
):
    """Generates the slide list, renders it and returns it with a download URL."""
    result = orchestrator.generate(payload.topic, payload.slideCount, payload.moreInfoMode)
    topic = result.slides[0].title
    selected_theme = resolve_theme_id(payload.theme)

    filename = build_filename(topic, len(result.slides))
    download_url = render_and_store(
        result.slides, selected_theme, topic, result.topicSummary, filename, store,
        "Failed to generate presentation",
    )

    gemini_utilized = result.generationMethod == GEMINI_AI_SUCCESS
    logging.info(f"SUCCESS: {filename} created with {result.generationMethod}")
    return {
        "success": True,
        "slides": [slide.model_dump() for slide in result.slides],
        "slideCount": len(result.slides),
        "downloadUrl": download_url,
        "filename": filename,
        "generationMethod": result.generationMethod,
        "apiStatus": result.apiStatus,
        "topicCategory": result.topicInfo.category,
        "topicSummary": result.topicSummary.model_dump(),
        "geminiUtilized": gemini_utilized,
        "message": (
            "Generated using Gemini AI with unique content for each slide"
            if gemini_utilized
            else "Generated using high-quality fallback with topic-specific content"
        ),
    }


@app.post("/api/regenerate-with-edits", summary="Re-render an edited slide list")
def regenerate_with_edits(payload: RegeneratePayload, store=Depends(get_presentation_store)):
    if not payload.slides:
        raise InvalidInput("Valid slides array required")

    topic = (payload.topic or "").strip() or payload.slides[0].title
    filename = build_filename(topic)
    download_url = render_and_store(
        payload.slides, resolve_theme_id(payload.theme), topic, payload.topicSummary, filename, store,
        "Failed to regenerate presentation",
    )
    return {"success": True, "downloadUrl": download_url, "filename": filename}


@app.post("/api/verify-api", summary="Re-run Gemini credential verification")
def verify_api(client: GeminiClient = Depends(get_gemini_client)):
    verified = client.verify()
    return {"success": verified, "apiStatus": client.status.value}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "5000")))

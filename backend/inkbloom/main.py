import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .exceptions import InvalidInputError, TeaserRejectedError
from .models import (
    ImageRequest,
    ImageResponse,
    NextSceneRequest,
    RejectionResponse,
    SceneRecord,
    SceneRequest,
    StyleContext,
)
from .services.ai_service import AIProcessor
from .services.scene_service import SceneService
from .services.style_context import style_store

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Ink Bloom")

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

ai_processor = AIProcessor()
scene_service = SceneService(ai_processor, style_store)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request body."})


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=400, content={"error": exc.detail})


@app.exception_handler(TeaserRejectedError)
async def teaser_rejected_handler(request: Request, exc: TeaserRejectedError):
    body = RejectionResponse(error=exc.detail, type=exc.classification)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/generate-scene", response_model=SceneRecord)
async def generate_scene(body: SceneRequest):
    try:
        return await scene_service.generate_scene(
            body.teaser, override=body.force, session_id=body.session_id
        )
    except (InvalidInputError, TeaserRejectedError):
        raise
    except Exception:  # noqa: BLE001
        logger.exception("Scene generation failed")
        return JSONResponse(status_code=500, content={"error": "Scene generation failed."})


@app.post("/generate-next-scene", response_model=SceneRecord)
async def generate_next_scene(body: NextSceneRequest):
    try:
        return await scene_service.generate_next_scene(body.teaser, session_id=body.session_id)
    except InvalidInputError:
        raise
    except Exception:  # noqa: BLE001
        logger.exception("Next scene generation failed")
        return JSONResponse(status_code=500, content={"error": "Scene generation failed."})


@app.post("/generate-image", response_model=ImageResponse)
async def generate_image(body: ImageRequest):
    try:
        images = await scene_service.generate_images(body.prompt, session_id=body.session_id)
    except InvalidInputError:
        raise
    except Exception:  # noqa: BLE001
        logger.exception("Image generation failed")
        return JSONResponse(status_code=500, content={"error": "Image generation failed."})
    return ImageResponse(images=images)


@app.get("/style-context", response_model=StyleContext)
async def get_style_context(session_id: Optional[str] = None):
    return style_store.get(session_id)


def run():
    import uvicorn

    logger.info("Ink Bloom backend running at http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .logger import get_logger
from .routes import router as routes_router

logger = get_logger(__name__, settings.log_level)

app = FastAPI(
    title=settings.app_name,
    description="Parses resumes and scores candidates against title criteria (stub implementation).",
    version="0.1.0",
    docs_url=settings.docs_url,
)

# Add CORS middleware to allow frontend requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Bad or unparseable bodies are a plain 400, not FastAPI's default 422
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# Include the API router so endpoints are registered properly
app.include_router(routes_router)

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import quiz_settings
from src.core.logging_config import setup_logging
from src.routers import quiz as quiz_router

# Configure logging VERY early
setup_logging(quiz_settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Personality Quiz Engine - Main API")

# The quiz front end is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=quiz_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(quiz_router.router, prefix="/api/v1", tags=["quizzes"])


@app.get("/health", tags=["Health Check"])
async def health():
    """
    Basic liveness check.
    """
    return {"status": "ok", "message": "Personality Quiz Engine is running."}


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting API with quiz data from {quiz_settings.data_dir}")
    uvicorn.run(app, host="0.0.0.0", port=8000)

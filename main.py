from contextlib import asynccontextmanager
from fastapi import FastAPI
from dotenv import load_dotenv
import os
import logging
from services.backend_client import DEFAULT_API_BASE_URL
from services.workflow_controller import WorkflowController
from routers import session

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def log_backend_configuration():
    """Log which summarization and dispatch backend the session talks to."""
    api_base_url = os.getenv("API_BASE_URL")

    if api_base_url:
        logger.info(f"Backend API: {api_base_url}")
    else:
        logger.warning(
            f"API_BASE_URL not set, using default backend: {DEFAULT_API_BASE_URL}"
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_backend_configuration()
    controller = WorkflowController()
    app.state.controller = controller
    logger.info("Session controller created")
    try:
        yield
    finally:
        await controller.aclose()
        logger.info("Session controller closed")


app = FastAPI(title="Meeting Notes Summarizer", lifespan=lifespan)

# Include routers
app.include_router(session.router)


@app.get("/health")
def health():
    return {"status": "ok"}

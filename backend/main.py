from dotenv import load_dotenv
load_dotenv()  # Load environment variables before importing config classes

from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.v1.api_router import api_router
from core.config import AIFlowConfigs, HostingConfigs
from core.exceptions import WorkbenchError
from core.logging_config import setup_logging
from services.workflow.workbench_controller import WorkbenchController

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not getattr(app.state, "controller", None):
        app.state.controller = WorkbenchController()
    logger.info("main: workbench started model=%s environment=%s", AIFlowConfigs.MODEL, HostingConfigs.ENVIRONMENT)
    yield
    app.state.controller.collector.reset()
    logger.info("main: workbench stopped")


# Create FastAPI app
app = FastAPI(title="requirements workbench backend", lifespan=lifespan)

# Include API router
app.include_router(api_router)


@app.exception_handler(WorkbenchError)
async def workbench_error_handler(request: Request, exc: WorkbenchError):
    log = logger.warning if exc.status_code < 500 else logger.error
    log("main: %s %s -> %d %s: %s", request.method, request.url.path, exc.status_code, exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health")
async def health():
    return {"status": "ok"}


# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=HostingConfigs.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if __name__ == "__main__":
    import uvicorn

    # Avoid infinite reload loops by excluding changing files like logs
    reload_enabled = os.getenv("RELOAD", "false").lower() == "true"
    reload_excludes = [
        "logs/*",
        "**/*.log",
        "**/__pycache__/**",
    ]

    uvicorn.run(
        "main:app",
        host=HostingConfigs.HOST,
        port=HostingConfigs.PORT,
        reload=reload_enabled,
        reload_excludes=reload_excludes,
    )

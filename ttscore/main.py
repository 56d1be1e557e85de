from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from ttscore.config import get_settings  # noqa: E402
from ttscore.core.exceptions import ExportError  # noqa: E402
from ttscore.core.logging import configure_logging  # noqa: E402

# IMPORT ROUTERS
from ttscore.routers.health import router as health_router  # noqa: E402
from ttscore.routers.scoring import (  # noqa: E402
    export_exception_handler,
    router as scoring_router,
)

settings = get_settings()
configure_logging(settings)

# SWAGGER UI — tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Scoring"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(ExportError, export_exception_handler)

# REGISTER ROUTERS
app.include_router(health_router)   # Health
app.include_router(scoring_router)  # Scoring / Export / i18n


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "ttscore.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )

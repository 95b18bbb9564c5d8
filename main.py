from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from settings import APP_NAME, LOG_LEVEL, CORS_ALLOW_ORIGINS
from scholarship_matching.routes import router as scholarship_router
from scholarship_matching.logic.constants import ENGINE_VERSION

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logging.info(f"{APP_NAME} starting (engine {ENGINE_VERSION})")

app = FastAPI(title=APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scholarship_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok", "app": APP_NAME}

# socialnet/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from socialnet import models  # noqa: F401 - register tables on Base.metadata
from socialnet.api import messages, notification
from socialnet.config import settings
from socialnet.database import Base, engine
from socialnet.error_handler import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready (%s)", settings.APP_ENV)
    yield


# Initialize FastAPI app
app = FastAPI(title="Socialnet Messaging API", debug=settings.DEBUG, lifespan=lifespan)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# API routers
app.include_router(messages.router)      # /messages/*
app.include_router(notification.router)  # /notifications/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "Socialnet messaging API is running",
        "version": "1.0.0",
    }

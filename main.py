from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # carga .env antes de tocar settings

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from toplangs.core.config import settings
from toplangs.routers import health, top_langs

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)

app = FastAPI(title="Top Languages Card API")


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(top_langs.router, prefix="", tags=["top-langs"])

# uvicorn main:app --reload --port 8080

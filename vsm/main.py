import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vsm.core.config import LOG_LEVEL, CORS_ORIGINS
from vsm.api.endpoints import vsm

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="VSM")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(vsm.router)

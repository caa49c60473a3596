# ataxx/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ataxx.api.routes import router as game_router
from ataxx.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)

app = FastAPI(title="Ataxx Engine")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(game_router)


@app.get("/")
async def root():
    return {"message": "Ataxx Engine API"}

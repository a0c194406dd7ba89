from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from api.routers import (
    gigs,
    sets,
    songs
)

from config import settings

# Lifespan event to handle startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    # テストでモックに差し替えられるよう、呼び出し時に参照する
    from infra.database import connection
    connection.init_db()  # Alembic マイグレーション + サンプル曲投入
    yield
    connection.close_db()

app = FastAPI(
    title="Setlist Management API",
    description="API for managing band setlists, songs, and gigs",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS Configuration
origins = [
    f"http://localhost:{settings.FRONTEND_PORT}",   # Frontend Dev Server
    f"http://127.0.0.1:{settings.FRONTEND_PORT}",   # Frontend Dev Server (IP)
    f"http://localhost:{settings.SETLIST_PORT}",
    f"http://127.0.0.1:{settings.SETLIST_PORT}",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Root endpoint for health check
@app.get("/")
async def root():
    return {"message": "Setlist Backend API is running"}

# Include Routers
app.include_router(gigs.router)
app.include_router(sets.router)
app.include_router(songs.router)

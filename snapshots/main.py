from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from snapshots.api import snapshots as snapshots_api, websocket as websocket_api
from snapshots.config import settings
from snapshots.schemas.snapshot import HealthResponse
import logging

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

app = FastAPI(
    title="Snapshots API",
    description="AI-generated snapshot cards explaining any topic",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(snapshots_api.router)
app.include_router(websocket_api.router)

@app.get("/health", response_model=HealthResponse)
async def health_check():
    return {"status": "healthy", "strategy": settings.generation_strategy}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

"""FastAPI application for evaluating candidate flights."""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import planning_router, status_router

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title="Flight Planner API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(planning_router)
app.include_router(status_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Flight Planner API", "status": "running"}


if __name__ == "__main__":
    import uvicorn
    from .config import Config
    from .logger import configure_logging

    config = Config()
    configure_logging(config.LOG_LEVEL, config.LOG_FILE)
    uvicorn.run(app, host="0.0.0.0", port=8000)

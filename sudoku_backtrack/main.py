"""Main FastAPI application for Sudoku Solver."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import API_VERSION, router
from .config import configure_logging, load_settings

settings = load_settings()


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Configure logging so a bad log level fails at startup."""
    try:
        configure_logging(settings.log_level)
    except ValueError as e:
        raise RuntimeError(f"Invalid configuration at startup: {e}") from e
    yield


app = FastAPI(
    title="Sudoku Solver API",
    description="Backtracking solver for 9x9 Sudoku grids",
    version=API_VERSION,
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Solver API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sudoku_backtrack.main:app", host=settings.host, port=settings.port)

"""Main FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import settings
from .routes import router

app = FastAPI(
    title="prdiff API",
    description="Merged, line-numbered hunks and review prompts from pull request patches",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Review tooling calls this from anywhere (CI runners, bots, local UIs)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1", tags=["PR Diff"])


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Collaborator ValueErrors (bad tokens, bad repo names, GitHub failures) become 400s."""
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/")
async def root():
    """Service info, including the merge distance applied when requests omit one."""
    return {
        "service": "prdiff API",
        "version": "1.0.0",
        "docs": "/docs",
        "api": "/api/v1",
        "endpoints": ["/api/v1/hunks", "/api/v1/prompt", "/api/v1/comments/prepare"],
        "default_merge_distance": settings.merge_distance,
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}

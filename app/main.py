# /app/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

# --- Application-specific Router Imports ---
from .routers import (
    auth_router,
    trending_router,
    generate_router,
    topics_router,
    generations_router,
)

# --- Startup Logic ---
from .core.config import get_jwt_secret
from .db.database import init_db


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to serve without a signing key for access tokens.
    get_jwt_secret()
    init_db()
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="TrendForge API",
    description="Turns trending topics into video scripts, thumbnails and blog posts.",
    version="1.0.0",
    lifespan=lifespan,
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Response Envelope for Errors ---
# Every error leaves the API as {"success": false, "message": ...}.

def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _error_response(exc.status_code, message, getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    print(f"[VALIDATION] {request.method} {request.url.path}: {exc.errors()}")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request payload")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    print(f"ERROR unhandled at {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
app.include_router(trending_router.router, prefix="/api/trending", tags=["Trending"])
app.include_router(generate_router.router, prefix="/api/generate", tags=["Generation"])
app.include_router(topics_router.router, prefix="/api/topics", tags=["Topics"])
app.include_router(generations_router.router, prefix="/api/generations", tags=["History"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "TrendForge backend is running!", "version": app.version}

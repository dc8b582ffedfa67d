from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from apikey_auth.config import get_settings
from apikey_auth.middleware.auth import ApiKeyAuthMiddleware
from apikey_auth.models.auth_models import HealthResponse
from apikey_auth.routers.auth import router as auth_router

app = FastAPI(title="ApiKey Auth API", version="0.1.0")

app.add_middleware(ApiKeyAuthMiddleware)

# CORS is added last so preflight requests are answered before the key check
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response


app.include_router(auth_router)


@app.get("/api/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()

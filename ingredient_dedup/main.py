import logging
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from .config import settings
from .routes.dedup import router as dedup_router
from .middleware.size_limit import SizeLimitMiddleware
from .errors import install_exception_handlers

logger = logging.getLogger("ingredient_dedup")

TAGS_METADATA = [
    {"name": "dedup", "description": "Análisis y desduplicado global de ingredientes en lotes de recetas."},
    {"name": "admin", "description": "Healthcheck."},
]

is_prod = settings.service_env == "prod"

app = FastAPI(
    title="Ingredient Dedup API",
    version="0.1.0",
    description="Deja cada ingrediente una sola vez en todo un lote de recetas (se conserva la primera aparición).",
    default_response_class=ORJSONResponse,
    openapi_tags=TAGS_METADATA,
    docs_url=None if is_prod else "/docs",
    redoc_url=None if is_prod else "/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.parsed_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middlewares
app.add_middleware(SizeLimitMiddleware)     # 413 si Content-Length excede

# Prometheus
instrumentator = Instrumentator().instrument(app)
instrumentator.expose(app, include_in_schema=False, endpoint="/metrics")

# Exception handlers
install_exception_handlers(app)

# Routers
app.include_router(dedup_router)

logger.info("Ingredient Dedup API lista (env=%s)", settings.service_env)

@app.get("/health", tags=["admin"], summary="Healthcheck simple")
async def health():
    return {"status": "ok", "env": settings.service_env}

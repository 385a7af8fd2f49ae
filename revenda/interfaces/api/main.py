# revenda/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from revenda.infrastructure.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from revenda.infrastructure.empresa import obter_empresa
    obter_empresa()  # valida CNPJ configurado no startup
    yield


app = FastAPI(
    title="Autos da Serra - Back-office API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

from revenda.interfaces.api.routes.documento_routes import router as documento_router  # noqa: E402
from revenda.interfaces.api.routes.simulacao_routes import router as simulacao_router  # noqa: E402
from revenda.interfaces.api.routes.utilitarios_routes import router as utilitarios_router  # noqa: E402

app.include_router(utilitarios_router, prefix="/api")
app.include_router(simulacao_router, prefix="/api")
app.include_router(documento_router, prefix="/api")

from __future__ import annotations
from typing import Dict, Optional
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

class RecipeBatchError(ValueError):
    """El lote de entrada no tiene la forma esperada (lista de recetas)."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index

class RecipeFileError(Exception):
    """No se pudo leer o parsear un fichero de recetas."""

class ErrorResponse(BaseModel):
    code: str = Field(examples=["bad_request"])
    detail: str = Field(examples=["Invalid input"])
    meta: dict | None = Field(default=None, examples=[{"index": 3}])

def install_exception_handlers(app: FastAPI):
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        code_map: Dict[int, str] = {
            400: "bad_request",
            404: "not_found",
            405: "method_not_allowed",
            413: "payload_too_large",
            422: "validation_error",
            500: "internal_error",
        }
        payload = ErrorResponse(code=code_map.get(exc.status_code, "error"), detail=str(exc.detail))
        return JSONResponse(status_code=exc.status_code, content=payload.model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        payload = ErrorResponse(code="validation_error", detail="Validation failed", meta={"errors": exc.errors()})
        return JSONResponse(status_code=422, content=payload.model_dump())

    @app.exception_handler(RecipeBatchError)
    async def batch_exception_handler(request: Request, exc: RecipeBatchError):
        meta = {"index": exc.index} if exc.index is not None else None
        payload = ErrorResponse(code="invalid_batch", detail=str(exc), meta=meta)
        return JSONResponse(status_code=422, content=payload.model_dump())

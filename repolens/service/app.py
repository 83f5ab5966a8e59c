"""FastAPI application exposing repolens analysis over HTTP."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..config import ConfigError
from ..logging import configure_logging, get_logger
from ..models import RepoDescriptor
from ..orchestrator import Orchestrator
from ..validators import ValidationError, ensure_valid

_logger = get_logger("service")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRequest(BaseModel):
    url: str
    language: str = ""
    description: str = ""


class AnalyzeResponse(_CamelModel):
    project_type: str
    summary: List[str]
    tasks: List[str]
    readme_tips: List[str]
    architecture: List[str]
    learning_path: List[str]
    extensions: List[str]


class ClassifyRequest(BaseModel):
    url: str
    description: str = ""


class ClassifyResponse(_CamelModel):
    project_type: str
    repo_name: str
    owner: str
    signals: List[str]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
    *,
    require_github: bool = True,
) -> FastAPI:
    """Create the FastAPI application exposing analyze and classify operations."""

    app = FastAPI(title="RepoLens Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze_repo(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> AnalyzeResponse:
        descriptor = RepoDescriptor(
            url=payload.url,
            language=payload.language,
            description=payload.description,
        ).normalised()
        ensure_valid(descriptor, require_github=require_github)
        report = orchestrator.run(descriptor)
        result = report.result
        return AnalyzeResponse(
            project_type=report.project_type.value,
            summary=list(result.summary),
            tasks=list(result.tasks),
            readme_tips=list(result.readme_tips),
            architecture=list(result.architecture),
            learning_path=list(result.learning_path),
            extensions=list(result.extensions),
        )

    @app.post("/classify", response_model=ClassifyResponse)
    async def classify_repo(
        payload: ClassifyRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> ClassifyResponse:
        descriptor = RepoDescriptor(url=payload.url, description=payload.description).normalised()
        report = orchestrator.run(descriptor)
        return ClassifyResponse(
            project_type=report.project_type.value,
            repo_name=report.signals.repo_name,
            owner=report.signals.owner,
            signals=[flag.value for flag in report.signals.active_flags()],
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(_: Any, exc: ValidationError) -> JSONResponse:
        _logger.debug("Rejected request: %s", exc)
        return JSONResponse(
            status_code=422,
            content={
                "detail": [
                    {"field": issue.field, "message": issue.message} for issue in exc.issues
                ]
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    *,
    require_github: bool = True,
    verbose: bool = False,
    log_file: Path | str | None = None,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    configure_logging(verbose=verbose, log_file=log_file)
    app = create_app(require_github=require_github)
    _logger.info("Serving on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ClassifyRequest",
    "ClassifyResponse",
    "create_app",
    "run_service",
]

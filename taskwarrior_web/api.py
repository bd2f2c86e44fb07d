"""FastAPI entrypoint for the Taskwarrior HTTP API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskwarrior_web.backend import TaskwarriorBackend
from taskwarrior_web.config import Settings, get_settings
from taskwarrior_web.errors import TaskwarriorError
from taskwarrior_web.gateway import TaskGateway
from taskwarrior_web.logging_setup import setup_logging
from taskwarrior_web.models.api import (
    CommandResult,
    ContextListResult,
    ContextSwitchResult,
    TaskListResult,
    TaskUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])
sync_router = APIRouter(tags=["sync"])

# axios serialises arrays as `tasks[]=a&tasks[]=b`, other clients as `tasks=a&tasks=b`.
_DELETE_QUERY_KEYS = ("tasks", "tasks[]")


def get_gateway(request: Request) -> TaskGateway:
    return request.app.state.gateway


def _command_response(result: CommandResult) -> JSONResponse:
    if result.success:
        return JSONResponse(status_code=200, content=result.model_dump())
    return JSONResponse(status_code=500, content={"success": False, "error": result.message})


# ---------------------------------------------------------------------------
# Routes (static paths before {name})
# ---------------------------------------------------------------------------


@router.get("", response_model=TaskListResult)
def list_tasks(gateway: TaskGateway = Depends(get_gateway)) -> TaskListResult:
    """Tasks under the active context, plus that context's name."""
    return gateway.list_tasks()


@router.put("")
def update_tasks(body: TaskUpdateRequest | None = None, gateway: TaskGateway = Depends(get_gateway)) -> JSONResponse:
    """Create or update tasks."""
    return _command_response(gateway.update_tasks(body.tasks if body else []))


@router.post("")
def create_tasks(body: TaskUpdateRequest | None = None, gateway: TaskGateway = Depends(get_gateway)) -> JSONResponse:
    """Same as PUT; `task import` creates tasks it does not know yet."""
    return _command_response(gateway.update_tasks(body.tasks if body else []))


@router.delete("")
def delete_tasks(request: Request, gateway: TaskGateway = Depends(get_gateway)) -> JSONResponse:
    """Delete the tasks whose uuids are given in the `tasks` query parameter."""
    uuids = [u for key in _DELETE_QUERY_KEYS for u in request.query_params.getlist(key)]
    return _command_response(gateway.delete_tasks(uuids))


@router.get("/contexts", response_model=ContextListResult)
def list_contexts(gateway: TaskGateway = Depends(get_gateway)) -> ContextListResult:
    return gateway.list_contexts()


@router.post("/context/{name:path}", response_model=ContextSwitchResult)
def set_context(name: str, gateway: TaskGateway = Depends(get_gateway)) -> ContextSwitchResult:
    """Activate a context ("none" clears it) and return the tasks it selects."""
    return gateway.set_context(name)


@sync_router.post("/sync")
def sync_tasks(gateway: TaskGateway = Depends(get_gateway)) -> JSONResponse:
    """Run `task sync` against the configured Taskserver."""
    return _command_response(gateway.sync())


def create_app(settings: Settings | None = None, gateway: TaskGateway | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Taskwarrior Web")
    app.state.settings = settings
    app.state.gateway = gateway or TaskGateway(TaskwarriorBackend())

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(TaskwarriorError)
    def handle_taskwarrior_error(request: Request, exc: TaskwarriorError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=500, content={"success": False, "error": exc.message})

    @app.get("/health", status_code=200)
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(router, prefix=settings.api_prefix)
    app.include_router(sync_router, prefix=settings.api_prefix)
    return app


def run() -> None:
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Serving Taskwarrior Web on %s:%s%s", settings.host, settings.port, settings.api_prefix or "/")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()

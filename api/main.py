import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from boards import router as boards_router
from columns import router as columns_router
from core.config import AppConfig, load_env_file
from core.service import Service, build_service

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def create_app(service: Service | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One service (and one DB pool) per process, shared by every request.
        owned = service is None
        if owned:
            load_env_file()
            app.state.service = await build_service()
        try:
            yield
        finally:
            if owned:
                await app.state.service.storage.close()

    app = FastAPI(title="bareretro api", lifespan=lifespan)
    if service is not None:
        app.state.service = service

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_errors(_: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        return PlainTextResponse(
            str(exc.detail or ""),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    app.include_router(boards_router.router, prefix=API_PREFIX, tags=["boards"])
    app.include_router(columns_router.router, prefix=API_PREFIX, tags=["columns"])

    @app.get("/health")
    def health(request: Request) -> dict:
        return {"status": "ok", "storage": request.app.state.service.storage.name}

    # Registered last: anything unmatched (path or method) ends up here.
    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    def not_found(path: str) -> PlainTextResponse:
        return PlainTextResponse("404 DNE", status_code=404)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    load_env_file()
    config = AppConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run()

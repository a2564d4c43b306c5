from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Header, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from .config import Settings, configure_logging, get_settings
from .datasources.base import SearchBackend
from .datasources.github_adapter import GitHubAdapter
from .errors import QueryValidationError, SearchError
from .options import DEFAULT_SORT
from .services.html import RenderMode, create_templates, render_search
from .services.pagination import ResultsView, build_results_view
from .services.query_builder import build_search_query, parse_page

STATIC_DIR = Path(__file__).resolve().parent / "static"

router = APIRouter()


def get_log(request: Request):
    return request.app.state.log


def get_search_backend(request: Request) -> SearchBackend:
    return request.app.state.search_backend


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    q: Optional[str] = None,
    lang: str = "",
    sort: str = "",
    scope: str = "",
    page: str = "",
    skip_table_header: str = "",
    hx_request: Optional[str] = Header(default=None),
    backend: SearchBackend = Depends(get_search_backend),
    settings: Settings = Depends(get_app_settings),
    log=Depends(get_log),
):
    templates = request.app.state.templates
    mode = RenderMode.from_request(hx_request, skip_table_header)

    # nothing searched yet: just the form
    if q is None:
        return render_search(templates, request, ResultsView(), mode)

    try:
        query = build_search_query(
            q,
            scope=scope or None,
            language=lang or None,
            sort=sort or DEFAULT_SORT,
            page=parse_page(page),
            count=settings.web_page_size,
        )
    except QueryValidationError as exc:
        log.info(f"rejected search q='{q}' lang='{lang}' sort='{sort}' scope='{scope}': {exc}")
        view = ResultsView(
            query=q,
            selected_lang=lang,
            selected_sort=sort or DEFAULT_SORT,
            selected_scope=scope,
            error=str(exc),
        )
        return render_search(templates, request, view, mode, status_code=400)

    encoded = query.encode()
    try:
        result = await backend.fetch(encoded)
    except SearchError as exc:
        log.opt(exception=exc).error(f"search failed for '{encoded}': {exc}")
        return PlainTextResponse("Internal Server Error", status_code=500)

    log.info(f"found {result.total_count} repositories for search: '{encoded}'")
    return render_search(templates, request, build_results_view(query, result), mode)


def create_app(
    settings: Optional[Settings] = None,
    backend: Optional[SearchBackend] = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = app.state.search_backend is None
        if owned:
            app.state.search_backend = GitHubAdapter(
                settings, log=app.state.log.bind(component="github")
            )
        try:
            yield
        finally:
            if owned:
                await app.state.search_backend.aclose()
                app.state.search_backend = None

    app = FastAPI(title="gh-query", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.search_backend = backend
    app.state.templates = create_templates()
    app.state.log = logger.bind(component="web")

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        client = request.client.host if request.client else "-"
        app.state.log.info(f"{client} - {request.method} {request.url}")
        return await call_next(request)

    app.include_router(router)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app


def serve() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Running server on {settings.listen_host}:{settings.listen_port}")
    uvicorn.run(create_app(settings), host=settings.listen_host, port=settings.listen_port)


if __name__ == "__main__":
    serve()

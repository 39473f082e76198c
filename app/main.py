import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .catalog import DEFAULT_LIMIT, DEFAULT_OFFSET, CatalogClient
from .checkout import MESSAGES, to_response, validate
from .errors import CatalogError
from .models import CheckoutReason, ErrorResponse
from .settings import load_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing keys or URL abort startup with ConfigurationError.
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    # httpx logs full request URLs, signed query string included
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logger.info("catalog API at %s", settings.api_url)

    app.state.catalog = CatalogClient(settings)
    try:
        yield
    finally:
        await app.state.catalog.aclose()


app = FastAPI(title="Comic Storefront", version="0.1.0", lifespan=lifespan)


def get_catalog(request: Request) -> CatalogClient:
    return request.app.state.catalog


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error, message=message).model_dump())


@app.get("/health")
def health():
    return {"ok": True}


@app.api_route("/api/checkout", methods=["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"])
async def checkout(request: Request):
    body = None
    if request.method == "POST":
        try:
            body = await request.json()
        except ValueError:
            # undecodable body is classified as a server fault below
            logger.error("checkout body is not valid JSON")

    outcome = validate(body, method=request.method)
    status, content = to_response(outcome)
    return JSONResponse(status_code=status, content=content)


async def _passthrough(fetch, path: str):
    try:
        data = await fetch()
    except CatalogError as exc:
        return error_response(exc.status_code, "CATALOG_ERROR", "Could not fetch data from the catalog API")
    except (httpx.TimeoutException, httpx.TransportError):
        logger.warning("catalog unreachable for %s", path)
        return error_response(502, "CATALOG_UNAVAILABLE", "The catalog API is unavailable; try again")
    except Exception:
        logger.exception("catalog request failed for %s", path)
        return error_response(500, CheckoutReason.SERVER_ERROR.value, MESSAGES[CheckoutReason.SERVER_ERROR])
    return JSONResponse(status_code=200, content=data)


@app.get("/api/comics")
async def list_comics(
    limit: int = DEFAULT_LIMIT,
    offset: int = DEFAULT_OFFSET,
    catalog: CatalogClient = Depends(get_catalog),
):
    return await _passthrough(lambda: catalog.get_comics(limit=limit, offset=offset), "/comics")


@app.get("/api/comics/{comic_id}")
async def get_comic(comic_id: int, catalog: CatalogClient = Depends(get_catalog)):
    return await _passthrough(lambda: catalog.get_comic(comic_id), f"/comics/{comic_id}")


@app.get("/api/characters/{character_id}")
async def get_character(character_id: int, catalog: CatalogClient = Depends(get_catalog)):
    return await _passthrough(lambda: catalog.get_character(character_id), f"/characters/{character_id}")

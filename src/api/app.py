"""
API Module
---------
Provides the HTTP endpoints of the location link service using FastAPI.
Features include:
- Generating shareable location links
- Serving the location capture page for a link
- Reverse geocoding coordinates posted by the capture page
"""
import logging
import uuid

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from src.api.pages import render_location_page
from src.geocoding.base import Geocoder
from src.models.link import ErrorResponse, LinkResponse
from src.models.location import ADDRESS_NOT_FOUND, Coordinates, GeocodeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(status_code, error, details=None):
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def get_geocoder(request: Request) -> Geocoder:
    """The geocoder built at startup, shared read-only by every request."""
    return request.app.state.geocoder


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return error_response(500, "Internal Server Error")


@router.get("/")
def read_root():
    return {"message": "Welcome to the Location Link API"}


@router.get("/location/{link_id}", response_class=HTMLResponse)
def location_page(link_id: str, geocoder: Geocoder = Depends(get_geocoder)):
    logger.info(f"Received request for location page with ID: {link_id}")
    try:
        page = render_location_page(link_id, attribution=geocoder.attribution)
    except Exception as e:
        logger.error(f"Error serving location page for ID: {link_id}: {str(e)}")
        return PlainTextResponse("Internal Server Error", status_code=500)

    logger.info(f"Served location page for ID: {link_id}")
    return HTMLResponse(page)


@router.get("/api/generate-link", response_model=LinkResponse)
def generate_link(request: Request):
    """Create a new shareable link. Nothing is stored; the id only correlates logs."""
    logger.info("Received request to generate shareable link")
    try:
        link_id = uuid.uuid4()
        host = request.headers.get("host") or request.url.netloc
        link = f"{request.app.state.link_scheme}://{host}/location/{link_id}"
    except Exception as e:
        logger.error(f"Error generating link: {str(e)}")
        return error_response(500, "Failed to generate link")

    logger.info(f"Generated link: {link}")
    return LinkResponse(link=link)


@router.post(
    "/api/geocode/{link_id}",
    response_model=GeocodeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def geocode(link_id: str, request: Request, geocoder: Geocoder = Depends(get_geocoder)):
    """
    Reverse geocode the coordinates posted by the capture page.

    Body: {"latitude": number, "longitude": number}
    """
    logger.info(f"Received geocode request for ID: {link_id}")

    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        coordinates = Coordinates.model_validate(payload)
    except ValidationError:
        logger.warning(f"Invalid coordinates for ID: {link_id}: {payload!r}")
        return error_response(400, "Invalid or missing coordinates")

    logger.info(f"Geocoding coordinates: lat={coordinates.latitude}, lon={coordinates.longitude}")
    try:
        # The provider clients are blocking; keep the event loop free
        address = await run_in_threadpool(geocoder.reverse, coordinates.latitude, coordinates.longitude)
    except Exception as e:
        logger.error(f"Error in geocode endpoint for ID: {link_id}: {str(e)}")
        return error_response(500, "Failed to geocode location", details=str(e))

    if address is None:
        logger.warning(f"No geocoding results for ID: {link_id}")
        return error_response(404, ADDRESS_NOT_FOUND)

    logger.info(f"Geocoded address for ID: {link_id}: {address.formatted_address}")
    return GeocodeResponse.build(coordinates, address)


def create_app(geocoder, link_scheme="https"):
    """
    Build the FastAPI application around an already constructed geocoder.

    Args:
        geocoder: Provider client shared by all requests
        link_scheme: Scheme used in generated links
    """
    app = FastAPI(
        title="Location Link API",
        description="Shareable links that capture a browser's location and resolve it to an address",
        version="1.0.0",
    )
    app.state.geocoder = geocoder
    app.state.link_scheme = link_scheme
    app.include_router(router)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    return app

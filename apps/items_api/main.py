"""Expose the items service over HTTP.

The GET handler is mounted on the configured route (``/api/v1/items`` by
default) and answers every request with status 200 and the JSON rendered by
:class:`apps.items_api.ItemsService`.  The content type is written as a raw
header so the configured value reaches the client unchanged.
"""

from typing import Dict

from fastapi import FastAPI, Request, Response

from apps.items_api import ItemsService
from lib.telemetry.logger import configure_logging, get_logger


logger = get_logger("items_api.http")


def create_app(service: ItemsService) -> FastAPI:
    """Build the FastAPI application serving ``service``."""

    app = FastAPI(title="Items API")

    @app.get(service.route_path)
    async def list_items(request: Request) -> Response:
        """Return the fixed items plus an echo of the request URL."""

        url = str(request.url)
        logger.debug("serving items for %s", url)
        return Response(
            content=service.render(url),
            status_code=200,
            headers={"Content-Type": service.content_type},
        )

    @app.get("/health")
    async def health() -> Dict[str, str]:
        """Liveness probe."""
        return {"status": "ok", "service": "items_api"}

    return app


service = ItemsService()
configure_logging(service.log_level)
app = create_app(service)

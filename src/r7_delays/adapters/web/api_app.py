"""Starlette web adapter exposing the delay JSON API."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from r7_delays import __version__
from r7_delays.adapters.config import AppConfig
from r7_delays.adapters.json_serializers import (
    snapshot_to_dict,
    station_to_dict,
    stop_to_dict,
    summary_to_dict,
)
from r7_delays.domain.ports import DelayService

from .rate_limit_middleware import RateLimitMiddleware
from .responses import error_response

logger = logging.getLogger(__name__)

REAL_DATA_SOURCE = "transport.rest HAFAS API (real-time data)"
SIMULATED_DATA_SOURCE = "Simulated data (upstream API unreachable)"


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


def _data_source(is_real_data: bool) -> str:
    return REAL_DATA_SOURCE if is_real_data else SIMULATED_DATA_SOURCE


class StarletteWebAdapter:
    """Starlette-based web adapter serving delay information as JSON."""

    def __init__(self, delay_service: DelayService, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            delay_service: Service resolving delays for the route.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not hasattr(delay_service, "resolve_all") or not callable(
            getattr(delay_service, "resolve_all", None)
        ):
            raise TypeError("delay_service must implement DelayService protocol")

        self.delay_service = delay_service
        self.config = config
        self._server: Any | None = None

    def create_app(self) -> Starlette:
        """Build the ASGI application with routes and middleware."""
        routes = [
            Route("/", self.index, methods=["GET"]),
            Route("/api/health", self.health, methods=["GET"]),
            Route("/api/delays", self.get_all_delays, methods=["GET"]),
            Route("/api/delays/{stop_id}", self.get_delay_by_stop, methods=["GET"]),
            Route("/api/stops", self.get_stops, methods=["GET"]),
            Route("/api/summary", self.get_route_summary, methods=["GET"]),
            Route("/api/search", self.search_stations, methods=["GET"]),
        ]
        middleware = [
            Middleware(
                CORSMiddleware,
                allow_origins=self.config.cors_allow_origins,
                allow_methods=["GET"],
                allow_headers=["*"],
            ),
            Middleware(RateLimitMiddleware, requests_per_minute=self.config.rate_limit_per_minute),
        ]
        return Starlette(routes=routes, middleware=middleware)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        app = self.create_app()
        route = self.delay_service.route
        logger.info(
            f"Serving route {route.name} ({route.description}) with {len(route.stops)} stops "
            f"on {self.config.host}:{self.config.port}"
        )
        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True

    def _error_response(self, error: str, exc: Exception) -> JSONResponse:
        logger.error(f"{error}: {exc}", exc_info=True)
        return error_response(error, 500, message=str(exc))

    async def index(self, _request: Request) -> JSONResponse:
        """Describe the service and its endpoints."""
        route = self.delay_service.route
        return JSONResponse(
            {
                "message": f"{route.name} delays API",
                "description": f"Delays for the {route.name} bus line ({route.description})",
                "version": __version__,
                "endpoints": {
                    "health": "/api/health",
                    "delays": "/api/delays",
                    "stops": "/api/stops",
                    "delayByStop": "/api/delays/{stopId}",
                    "summary": "/api/summary",
                    "search": "/api/search?q=<query>",
                },
            }
        )

    async def health(self, _request: Request) -> JSONResponse:
        """Liveness check."""
        return JSONResponse({"status": "OK", "timestamp": _timestamp()})

    async def get_all_delays(self, _request: Request) -> JSONResponse:
        """Delay snapshots for every stop, with a short summary."""
        try:
            is_real_data = await self.delay_service.is_using_real_data()
            snapshots = await self.delay_service.resolve_all()
            summary = self.delay_service.summarize(snapshots)
        except Exception as e:
            return self._error_response("Failed to fetch delay information", e)

        route = self.delay_service.route
        return JSONResponse(
            {
                "success": True,
                "route": route.name,
                "routeDescription": route.description,
                "totalStops": summary.total_stops,
                "dataSource": _data_source(is_real_data),
                "isRealData": is_real_data,
                "data": [snapshot_to_dict(s) for s in snapshots],
                "summary": {
                    "averageDelayMinutes": summary.average_delay_minutes,
                    "stopsWithData": summary.stops_with_data,
                    "stopsWithoutData": summary.stops_without_data,
                },
                "timestamp": _timestamp(),
            }
        )

    async def get_stops(self, _request: Request) -> JSONResponse:
        """Static stop list."""
        try:
            stops = self.delay_service.list_stops()
        except Exception as e:
            return self._error_response("Failed to fetch stops information", e)

        return JSONResponse(
            {
                "success": True,
                "route": self.delay_service.route.name,
                "data": [stop_to_dict(s) for s in stops],
                "timestamp": _timestamp(),
            }
        )

    async def get_delay_by_stop(self, request: Request) -> JSONResponse:
        """Delay snapshot for a single stop."""
        stop_id = request.path_params["stop_id"]
        try:
            is_real_data = await self.delay_service.is_using_real_data()
            snapshot = await self.delay_service.resolve_stop(stop_id)
        except Exception as e:
            return self._error_response("Failed to fetch delay information for stop", e)

        if snapshot is None:
            return error_response("Stop not found", 404)

        return JSONResponse(
            {
                "success": True,
                "route": self.delay_service.route.name,
                "dataSource": _data_source(is_real_data),
                "isRealData": is_real_data,
                "data": snapshot_to_dict(snapshot),
                "timestamp": _timestamp(),
            }
        )

    async def get_route_summary(self, _request: Request) -> JSONResponse:
        """Aggregate delay statistics for the route."""
        try:
            is_real_data = await self.delay_service.is_using_real_data()
            snapshots = await self.delay_service.resolve_all()
            summary = self.delay_service.summarize(snapshots)
        except Exception as e:
            return self._error_response("Failed to fetch route summary", e)

        route = self.delay_service.route
        return JSONResponse(
            {
                "success": True,
                "route": route.name,
                "routeDescription": route.description,
                "dataSource": _data_source(is_real_data),
                "isRealData": is_real_data,
                "summary": summary_to_dict(summary),
                "timestamp": _timestamp(),
            }
        )

    async def search_stations(self, request: Request) -> JSONResponse:
        """Station search by name."""
        query = request.query_params.get("q")
        min_length = self.config.search_min_query_length
        if not query or len(query) < min_length:
            return error_response(f"Query must be at least {min_length} characters", 400)

        try:
            stations = await self.delay_service.search_stations(query)
        except Exception as e:
            return self._error_response("Failed to search stations", e)

        return JSONResponse(
            {
                "success": True,
                "query": query,
                "results": [station_to_dict(s) for s in stations],
                "timestamp": _timestamp(),
            }
        )

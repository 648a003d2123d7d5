"""Wiring of adapters and application services."""

import random
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from r7_delays.adapters.api_rate_limiter import ApiRateLimiter
from r7_delays.adapters.config import AppConfig
from r7_delays.adapters.transport_rest import (
    TransportRestApi,
    TransportRestHttpClient,
    UpstreamRequestLogger,
)
from r7_delays.application.services import DelayResolver, DelayResolverSettings
from r7_delays.domain.models import RouteConfiguration


@asynccontextmanager
async def open_upstream_session(config: AppConfig) -> AsyncIterator[aiohttp.ClientSession]:
    """Open the shared aiohttp session used for all upstream requests."""
    timeout = aiohttp.ClientTimeout(total=config.upstream_timeout_seconds)
    headers = {"User-Agent": config.upstream_user_agent}
    async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
        yield session


def build_transit_api(config: AppConfig, session: aiohttp.ClientSession) -> TransportRestApi:
    """Create the upstream API adapter."""
    http_client = TransportRestHttpClient(
        session=session,
        base_url=config.upstream_base_url,
        rate_limiter=ApiRateLimiter("transport_rest", config.upstream_min_delay_seconds),
        request_logger=UpstreamRequestLogger(config.log_upstream_requests),
    )
    return TransportRestApi(http_client)


def build_delay_resolver(
    config: AppConfig,
    route: RouteConfiguration,
    session: aiohttp.ClientSession,
) -> DelayResolver:
    """Create the delay resolver for a route from app config."""
    settings = DelayResolverSettings(
        probe_query=config.probe_query,
        force_simulation=config.force_simulation,
        station_candidates=config.station_candidates,
        departure_results=config.departure_results,
        lookahead_minutes=config.lookahead_minutes,
        upcoming_departures=config.upcoming_departures,
        search_results=config.search_results,
    )
    random_source = random.Random(config.simulation_seed)
    return DelayResolver(
        route,
        build_transit_api(config, session),
        settings=settings,
        random_source=random_source,
    )

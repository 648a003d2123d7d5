"""Constants for the transport.rest adapter.

The transport.rest APIs (https://v6.db.transport.rest/api.html) wrap HAFAS
endpoints in a REST interface. Rate limit: 100 requests/minute, no
authentication required.
"""

DEFAULT_BASE_URL = "https://v6.db.transport.rest"
LOCATIONS_PATH = "/locations"  # GET /locations?query=...&results=...
STOPS_PATH = "/stops"  # GET /stops/:id/departures?duration=...&results=...

DEFAULT_HEADERS = {
    "Accept": "application/json",
}

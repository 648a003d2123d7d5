"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """A physical halt along the route, identified independently of upstream ids."""

    id: str
    name: str
    search_name: str
    order: int  # 1-based position along the route
    external_id: str | None = None  # Upstream station id, if known up front

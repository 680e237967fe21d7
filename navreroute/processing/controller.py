"""
Reroute controller - the navigation session's rerouting trigger.

Realigns the active route request, records the attempt, and hands the new
request to the directions backend. A failed realignment abandons the reroute
for this cycle; the caller retries on the next progress update.
"""

import time
import uuid
import logging
from datetime import datetime
from typing import Optional

from ..config import Config
from ..clients.directions import DirectionsClient, DirectionsError
from ..models.history import RerouteAttempt
from ..models.options import RouteRequestOptions
from ..models.progress import ProgressSnapshot, PositionFix
from ..models.results import RealignmentResult
from ..storage.history import RerouteHistoryStore
from .realigner import OptionsRealigner

logger = logging.getLogger(__name__)


class RerouteController:
    """Realign, record, and fetch the new route."""

    def __init__(
        self,
        realigner: OptionsRealigner,
        directions: DirectionsClient,
        history: RerouteHistoryStore,
    ):
        self.realigner = realigner
        self.directions = directions
        self.history = history

    @classmethod
    def from_config(cls, config: Config, history: Optional[RerouteHistoryStore] = None) -> "RerouteController":
        return cls(
            realigner=OptionsRealigner(config.default_bearing_tolerance),
            directions=DirectionsClient(
                base_url=config.directions_base_url,
                access_token=config.directions_access_token,
            ),
            history=history or RerouteHistoryStore(max_entries=config.history_max_entries),
        )

    async def close(self):
        """Close all HTTP clients."""
        await self.directions.close()

    async def test_all_apis(self) -> dict[str, bool]:
        """Test connectivity to all APIs."""
        return {
            "directions": await self.directions.test_connection(),
        }

    def realign(
        self,
        options: Optional[RouteRequestOptions],
        progress: Optional[ProgressSnapshot],
        fix: Optional[PositionFix],
        request_id: Optional[str] = None,
    ) -> tuple[str, RealignmentResult]:
        """
        Realign without contacting the backend. The attempt is recorded.

        Returns:
            (request_id, result)
        """
        request_id = request_id or str(uuid.uuid4())
        started = time.perf_counter()

        result = self.realigner.realign(options, progress, fix)

        self.history.add_entry(
            RerouteAttempt(
                request_id=request_id,
                timestamp=datetime.utcnow(),
                progress=progress,
                fix=fix,
                succeeded=result.is_success,
                error_kind=result.failure.kind if result.failure else None,
                message=result.failure.message if result.failure else None,
                realigned_options=result.options,
                duration_seconds=time.perf_counter() - started,
            )
        )
        if not result.is_success:
            logger.warning(
                f"Reroute {request_id} abandoned ({result.failure.kind.value}); "
                f"retry on next progress update: {result.failure.retryable}"
            )
        return request_id, result

    async def reroute(
        self,
        options: Optional[RouteRequestOptions],
        progress: Optional[ProgressSnapshot],
        fix: Optional[PositionFix],
        request_id: Optional[str] = None,
    ) -> dict:
        """
        Full reroute cycle: realign, then fetch the route.

        Returns:
            Dict with status "success" (route + options) or "error"
        """
        started = time.perf_counter()
        request_id, result = self.realign(options, progress, fix, request_id)

        if not result.is_success:
            return {
                "status": "error",
                "request_id": request_id,
                "error_kind": result.failure.kind.value,
                "error": result.failure.message,
                "retryable": result.failure.retryable,
            }

        attempt = self.history.get_entry(request_id)
        try:
            route = await self.directions.get_route(result.options)
        except DirectionsError as e:
            logger.exception(f"Reroute {request_id}: directions request failed")
            if attempt:
                self.history.add_entry(
                    attempt.model_copy(update={
                        "route_error": str(e),
                        "duration_seconds": time.perf_counter() - started,
                    })
                )
            return {
                "status": "error",
                "request_id": request_id,
                "error_kind": "directions_failed",
                "error": str(e),
                "retryable": True,
            }

        if attempt:
            self.history.add_entry(
                attempt.model_copy(update={
                    "route_fetched": True,
                    "duration_seconds": time.perf_counter() - started,
                })
            )
        logger.info(
            f"Reroute {request_id}: {len(result.options.coordinates)} coordinates, "
            f"{route['distance_m']:.0f} m"
        )
        return {
            "status": "success",
            "request_id": request_id,
            "options": result.options.model_dump(mode="json", exclude={"access_token"}),
            "route": route,
        }

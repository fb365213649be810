"""
Health check handler.
"""

from fastapi import APIRouter

from ...services import SchedulingClient


class HealthHandler:
    """Reports liveness and whether a SimplyBook session is held."""

    def __init__(self, client: SchedulingClient):
        self.client = client
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):

        @self.router.get("")
        async def health_check():
            # no remote call: a missing token only means the next request logs in
            return {
                "status": "ok",
                "session": self.client.session.token is not None,
            }

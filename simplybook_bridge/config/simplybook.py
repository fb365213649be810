"""
Remote SimplyBook API configuration.
"""

from typing import Dict, FrozenSet
from pydantic import BaseModel, ConfigDict


class SimplyBookConfig(BaseModel):
    """Connection settings for the SimplyBook JSON-RPC endpoint."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    company: str
    api_key: str
    secret_key: str
    timeout: float = 15.0
    auth_error_codes: FrozenSet[int] = frozenset()

    def get_rpc_url(self) -> str:
        """Get URL for authenticated RPC calls."""
        return f"{self.base_url.rstrip('/')}/"

    def get_login_url(self) -> str:
        """Get URL for the getToken login call."""
        return f"{self.base_url.rstrip('/')}/login"

    def get_auth_headers(self, token: str) -> Dict[str, str]:
        """Headers carried by every authenticated call."""
        return {
            "X-Company-Login": self.company,
            "X-Token": token,
        }

"""
JSON-RPC 2.0 over HTTP.
"""

import itertools
from typing import Any, Dict, List, Optional

import httpx


class RemoteFault(Exception):
    """A single failed remote call, before any retry policy is applied."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


def _error_member(body: Any) -> Optional[Dict[str, Any]]:
    if isinstance(body, dict) and body.get("error"):
        error = body["error"]
        return error if isinstance(error, dict) else {"message": str(error)}
    return None


def _fault_from_error(error: Dict[str, Any], default: str, status_code: Optional[int] = None) -> RemoteFault:
    code = error.get("code")
    return RemoteFault(
        str(error.get("message") or default),
        code=code if isinstance(code, int) else None,
        status_code=status_code,
    )


class JsonRpcTransport:
    """Posts JSON-RPC requests, one short-lived HTTP client per call."""

    def __init__(
        self,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self._transport = transport
        self._ids = itertools.count(1)

    def build_payload(self, method: str, params: List[Any]) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": next(self._ids),
        }

    async def post(
        self,
        url: str,
        method: str,
        params: List[Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Issue one JSON-RPC call and return its ``result`` member.

        Raises:
            RemoteFault: on timeouts, transport errors, HTTP errors,
                undecodable bodies or a JSON-RPC ``error`` member
        """
        payload = self.build_payload(method, params)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers or {})
                response.raise_for_status()
                body = response.json()
        except httpx.TimeoutException:
            raise RemoteFault("Request timed out")
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            try:
                error = _error_member(e.response.json())
            except ValueError:
                error = None
            if error:
                raise _fault_from_error(error, f"HTTP error {status}", status_code=status)
            raise RemoteFault(f"HTTP error {status}", status_code=status)
        except httpx.HTTPError as e:
            raise RemoteFault(f"Request failed: {e}")
        except ValueError:
            raise RemoteFault("Invalid JSON in response")

        error = _error_member(body)
        if error:
            raise _fault_from_error(error, "RPC error")

        if not isinstance(body, dict):
            raise RemoteFault("Malformed JSON-RPC response")
        return body.get("result")

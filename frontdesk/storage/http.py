"""Remote REST record store"""

from typing import Any, Iterable, List, Optional

import httpx
import structlog
from pydantic_core import to_jsonable_python

from frontdesk.config import settings
from frontdesk.errors import FieldError, TransportFailure
from frontdesk.storage.base import BaseRecordStore, Record, RecordResult

logger = structlog.get_logger()


class HttpRecordStore(BaseRecordStore):
    """
    Record store backed by a remote REST service.

    Expected endpoints, per collection:
      GET    {base_url}/{collection}?fields=a,b     -> {"data": [...]}
      GET    {base_url}/{collection}/{id}           -> {"data": {...}} or 404
      POST   {base_url}/{collection}  {"records"}   -> {"results": [...]}
      PUT    {base_url}/{collection}  {"records"}   -> {"results": [...]}
      DELETE {base_url}/{collection}  {"ids"}       -> {"results": [...]}
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.storage_url).rstrip("/")
        api_key = api_key if api_key is not None else settings.storage_api_key
        headers = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout or settings.storage_timeout_seconds,
            transport=transport,
        )

    async def close(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        if "json" in kwargs:
            kwargs["json"] = to_jsonable_python(kwargs["json"])

        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Storage request failed", method=method, path=path, error=str(e))
            raise TransportFailure(f"Storage request failed: {e}") from e

        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Storage returned an error",
                status_code=response.status_code,
                url=str(response.request.url),
            )
            raise TransportFailure(f"Storage returned {response.status_code}") from e

    @staticmethod
    def _json(response: httpx.Response) -> dict:
        """Decode a response envelope; anything but a JSON object is a storage failure"""
        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                "Storage returned a non-JSON body",
                status_code=response.status_code,
                url=str(response.request.url),
            )
            raise TransportFailure("Storage returned an unreadable response") from e

        if not isinstance(payload, dict):
            raise TransportFailure("Storage returned an unexpected response")
        return payload

    @staticmethod
    def _parse_results(payload: Any) -> List[RecordResult]:
        results = []
        for item in payload.get("results", []):
            errors = [
                FieldError(
                    field=error.get("field") or error.get("fieldLabel") or "__root__",
                    message=error.get("message", "Invalid value"),
                )
                for error in item.get("errors") or []
            ]
            results.append(
                RecordResult(
                    success=bool(item.get("success")),
                    record=item.get("data"),
                    errors=errors,
                    message=item.get("message"),
                    not_found=bool(item.get("not_found", False)),
                )
            )
        return results

    async def fetch_all(
        self,
        collection: str,
        fields: Optional[Iterable[str]] = None,
    ) -> List[Record]:
        params = {"fields": ",".join(sorted(fields))} if fields else None
        response = await self._request("GET", f"/{collection}", params=params)
        self._raise_for_status(response)
        return self._json(response).get("data") or []

    async def fetch_by_id(
        self,
        collection: str,
        record_id: int,
        fields: Optional[Iterable[str]] = None,
    ) -> Optional[Record]:
        params = {"fields": ",".join(sorted(fields))} if fields else None
        response = await self._request("GET", f"/{collection}/{record_id}", params=params)
        if response.status_code == 404:
            return None
        self._raise_for_status(response)
        return self._json(response).get("data")

    async def create_records(
        self,
        collection: str,
        records: List[Record],
    ) -> List[RecordResult]:
        response = await self._request("POST", f"/{collection}", json={"records": records})
        self._raise_for_status(response)
        return self._parse_results(self._json(response))

    async def update_records(
        self,
        collection: str,
        records: List[Record],
    ) -> List[RecordResult]:
        response = await self._request("PUT", f"/{collection}", json={"records": records})
        self._raise_for_status(response)
        return self._parse_results(self._json(response))

    async def delete_records(
        self,
        collection: str,
        ids: List[int],
    ) -> List[RecordResult]:
        response = await self._request("DELETE", f"/{collection}", json={"ids": ids})
        self._raise_for_status(response)
        return self._parse_results(self._json(response))

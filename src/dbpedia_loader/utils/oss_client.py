"""
OpenSearchServer v1 REST client.

Only the document update call is implemented:

    PUT {instance_url}/services/rest/index/{index_name}/document?login=..&key=..

with a JSON array of ``{"lang": ..., "fields": [{"name", "value", "boost"}]}``.
"""
from typing import Any, Dict, Optional, Sequence
from urllib.parse import quote

import requests

from dbpedia_loader.core.indexing import DocumentSink
from dbpedia_loader.core.logging import get_logger
from dbpedia_loader.errors import ProtocolError
from dbpedia_loader.schema import DocumentUpdate

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10 * 60  # seconds


class OpenSearchServerClient:
    """Holds the instance URL, the credentials and the HTTP session."""

    def __init__(
        self,
        instance_url: str,
        login: Optional[str] = None,
        key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        if not instance_url:
            raise ValueError("instance_url is required")
        self.instance_url = instance_url.rstrip("/")
        self.login = login
        self.key = key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def _params(self) -> Dict[str, str]:
        params = {}
        if self.login:
            params["login"] = self.login
        if self.key:
            params["key"] = self.key
        return params

    def url(self, *segments: str) -> str:
        return "/".join([self.instance_url] + [quote(s, safe="") for s in segments])

    def put_json(self, url: str, payload: Any) -> Dict[str, Any]:
        """
        PUT a JSON payload and return the decoded response.

        Raises:
            requests.HTTPError: non-2xx status
            requests.RequestException: transport failure
            ProtocolError: the service answered with ``successful: false``
                or an unreadable body
        """
        response = self.session.put(
            url, json=payload, params=self._params(), timeout=self.timeout
        )
        response.raise_for_status()

        if not response.content:
            return {}
        try:
            result = response.json()
        except ValueError as e:
            raise ProtocolError(f"Invalid JSON response from {url}") from e

        if isinstance(result, dict) and result.get("successful") is False:
            raise ProtocolError(result.get("info") or f"Request to {url} was not successful")
        return result

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "OpenSearchServerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class UpdateApi(DocumentSink):
    """Document update API, usable as the pipeline's :class:`DocumentSink`."""

    def __init__(self, client: OpenSearchServerClient):
        self.client = client

    def update_documents(
        self, index_name: str, documents: Sequence[DocumentUpdate]
    ) -> Dict[str, Any]:
        url = self.client.url("services", "rest", "index", index_name, "document")
        payload = [document.to_json() for document in documents]
        logger.debug("update_documents", index=index_name, documents=len(payload))
        return self.client.put_json(url, payload)

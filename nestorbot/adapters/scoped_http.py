"""Scoped HTTP client for listener scripts, built on aiohttp.

A client is scoped to one base URL and is configured through chainable
builders before a request coroutine is awaited:

    resp = await robot.http("https://api.github.com") \\
        .header("accept", "application/json") \\
        .path("user/show/technoweenie") \\
        .get()
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode, urlsplit, urlunsplit, parse_qsl

import aiohttp
from multidict import CIMultiDict

from nestorbot.config import __version__

DEFAULT_HTTP_OPTIONS: Dict[str, Any] = {
    "headers": {"User-Agent": f"Nestorbot/{__version__}"},
    "timeout": 30.0,
}


def merge_options(*sources: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge option mappings left to right; later sources win.

    ``headers`` are merged key by key, ignoring case, instead of replaced
    wholesale.
    """
    merged: Dict[str, Any] = {"headers": CIMultiDict()}
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            if key == "headers":
                merged["headers"].update(value or {})
            else:
                merged[key] = value
    return merged


@dataclass
class HttpResponse:
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.body)


class ScopedHttpClient:
    """HTTP client bound to a base URL and a merged set of options."""

    def __init__(self, url: str, options: Optional[Mapping[str, Any]] = None):
        self.options: Dict[str, Any] = merge_options(options)
        parts = urlsplit(url)
        self.options.update(
            scheme=parts.scheme or "http",
            netloc=parts.netloc,
            path=parts.path,
            query=dict(parse_qsl(parts.query)),
        )

    @classmethod
    def create(cls, url: str, *option_sources: Optional[Mapping[str, Any]]) -> "ScopedHttpClient":
        """Build a client from option sources in increasing precedence."""
        return cls(url, merge_options(DEFAULT_HTTP_OPTIONS, *option_sources))

    # -- Builders --

    def header(self, name: str, value: str) -> "ScopedHttpClient":
        self.options["headers"][name] = value
        return self

    def headers(self, mapping: Mapping[str, str]) -> "ScopedHttpClient":
        self.options["headers"].update(mapping)
        return self

    def path(self, segment: str) -> "ScopedHttpClient":
        base = self.options["path"].rstrip("/")
        if segment.startswith("/"):
            self.options["path"] = segment
        else:
            self.options["path"] = f"{base}/{segment}"
        return self

    def query(self, key: Union[str, Mapping[str, Any]], value: Any = None) -> "ScopedHttpClient":
        if isinstance(key, Mapping):
            self.options["query"].update(key)
        else:
            self.options["query"][key] = value
        return self

    def timeout(self, seconds: float) -> "ScopedHttpClient":
        self.options["timeout"] = seconds
        return self

    def auth(self, user: str, password: str = "") -> "ScopedHttpClient":
        self.options["auth"] = aiohttp.BasicAuth(user, password)
        return self

    def scope(self, url: str, options: Optional[Mapping[str, Any]] = None) -> "ScopedHttpClient":
        """Derive a client for a relative or absolute URL, inheriting options."""
        inherited = {
            k: v for k, v in self.options.items()
            if k not in ("scheme", "netloc", "path", "query")
        }
        if not urlsplit(url).netloc:
            url = f"{self.url.rstrip('/')}/{url.lstrip('/')}"
        return ScopedHttpClient(url, merge_options(inherited, options))

    @property
    def url(self) -> str:
        query = urlencode(self.options["query"])
        return urlunsplit((
            self.options["scheme"],
            self.options["netloc"],
            self.options["path"],
            query,
            "",
        ))

    # -- Requests --

    async def request(self, method: str, data: Any = None) -> HttpResponse:
        connector = self.options.get("connector")
        timeout = aiohttp.ClientTimeout(total=self.options.get("timeout"))
        headers = {str(k): v for k, v in self.options["headers"].items()}
        kwargs: Dict[str, Any] = {"headers": headers}
        if data is not None:
            kwargs["data"] = data
        if self.options.get("auth"):
            kwargs["auth"] = self.options["auth"]
        if self.options.get("proxy"):
            kwargs["proxy"] = self.options["proxy"]

        try:
            async with aiohttp.ClientSession(
                connector=connector,
                connector_owner=connector is None,
                timeout=timeout,
            ) as session:
                async with session.request(method, self.url, **kwargs) as resp:
                    body = await resp.text()
                    return HttpResponse(
                        status=resp.status,
                        headers=dict(resp.headers),
                        body=body,
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            return HttpResponse(status=0, error=str(e) or e.__class__.__name__)

    async def get(self) -> HttpResponse:
        return await self.request("GET")

    async def head(self) -> HttpResponse:
        return await self.request("HEAD")

    async def delete(self) -> HttpResponse:
        return await self.request("DELETE")

    async def post(self, data: Any = None) -> HttpResponse:
        return await self.request("POST", data)

    async def put(self, data: Any = None) -> HttpResponse:
        return await self.request("PUT", data)

    async def patch(self, data: Any = None) -> HttpResponse:
        return await self.request("PATCH", data)

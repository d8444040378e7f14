"""
Runtime surface for generated Twirp bindings

Generated modules import this as ``twirp``. It provides the call context,
the two error domains (server responses vs client failures), an in-process
router table and a client wrapper over a pluggable transport. Serialization
and HTTP handling belong to the transport, not to this module.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, Protocol, runtime_checkable


@dataclass
class Context:
    """Per-call context passed to every server operation"""
    headers: dict[str, str] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)


# ══════════════════════════════════════════════════════════════
# Server Errors
# ══════════════════════════════════════════════════════════════

class ErrorCode(Enum):
    """Twirp error codes and the HTTP status each maps to"""
    CANCELED = ("canceled", 408)
    UNKNOWN = ("unknown", 500)
    INVALID_ARGUMENT = ("invalid_argument", 400)
    MALFORMED = ("malformed", 400)
    DEADLINE_EXCEEDED = ("deadline_exceeded", 408)
    NOT_FOUND = ("not_found", 404)
    BAD_ROUTE = ("bad_route", 404)
    ALREADY_EXISTS = ("already_exists", 409)
    PERMISSION_DENIED = ("permission_denied", 403)
    UNAUTHENTICATED = ("unauthenticated", 401)
    RESOURCE_EXHAUSTED = ("resource_exhausted", 429)
    FAILED_PRECONDITION = ("failed_precondition", 412)
    ABORTED = ("aborted", 409)
    OUT_OF_RANGE = ("out_of_range", 400)
    UNIMPLEMENTED = ("unimplemented", 501)
    INTERNAL = ("internal", 500)
    UNAVAILABLE = ("unavailable", 503)
    DATA_LOSS = ("data_loss", 500)

    def __init__(self, code: str, http_status: int):
        self.code = code
        self.http_status = http_status


@runtime_checkable
class IntoTwirpResponse(Protocol):
    """Business errors the router can turn into a wire response"""

    def into_twirp_response(self) -> 'TwirpErrorResponse':
        ...


class TwirpErrorResponse(Exception):
    """Error response as sent on the wire"""

    def __init__(self, code: ErrorCode, msg: str, meta: Optional[dict[str, str]] = None):
        super().__init__(f"{code.code}: {msg}")
        self.code = code
        self.msg = msg
        self.meta = dict(meta or {})

    @property
    def http_status(self) -> int:
        return self.code.http_status

    def into_twirp_response(self) -> 'TwirpErrorResponse':
        return self

    def to_dict(self) -> dict:
        data = {"code": self.code.code, "msg": self.msg}
        if self.meta:
            data["meta"] = dict(self.meta)
        return data

    def __repr__(self):
        return f"TwirpErrorResponse({self.code.code!r}, {self.msg!r})"


def require_into_response(api) -> None:
    """Check that a service's business error converts to a wire response"""
    error_type = getattr(api, "Error", None)
    if not isinstance(error_type, type):
        raise TypeError(f"{type(api).__name__}.Error must be an exception class")
    if not issubclass(error_type, IntoTwirpResponse):
        raise TypeError(
            f"{type(api).__name__}.Error ({error_type.__name__}) "
            "does not implement into_twirp_response()"
        )


# ══════════════════════════════════════════════════════════════
# Client Errors
# ══════════════════════════════════════════════════════════════

class ClientError(Exception):
    """Transport or protocol failure seen by a client"""

    def __init__(self, msg: str, response: Optional[TwirpErrorResponse] = None):
        super().__init__(msg)
        self.msg = msg
        self.response = response

    @classmethod
    def from_response(cls, response: TwirpErrorResponse) -> 'ClientError':
        return cls(f"twirp error {response.code.code}: {response.msg}", response)


# ══════════════════════════════════════════════════════════════
# Shared Ownership
# ══════════════════════════════════════════════════════════════

class Shared:
    """Base for adapters that forward a service interface to a shared value.

    Generated ``Shared<Service>`` classes list the operations; this base holds
    the wrapped implementation (under a name no generated operation can take)
    and exposes its error type. No locking is done here, the wrapped value
    must tolerate concurrent calls itself.
    """

    def __init__(self, inner):
        self._twirp_inner = inner

    @property
    def Error(self):
        return self._twirp_inner.Error

    def __repr__(self):
        return f"{type(self).__name__}({self._twirp_inner!r})"


# ══════════════════════════════════════════════════════════════
# Routing
# ══════════════════════════════════════════════════════════════

Handler = Callable[[Any, Context, Any], Awaitable[Any]]


@dataclass(frozen=True)
class Route:
    """One registered path bound to a service operation"""
    path: str
    input_type: Any
    handler: Handler
    api: Any

    async def invoke(self, ctx: Context, req):
        return await self.handler(self.api, ctx, req)


class Router:
    """Mapping from full request path to route"""

    def __init__(self, routes: Optional[dict[str, Route]] = None):
        self._routes: dict[str, Route] = dict(routes or {})

    def paths(self) -> list[str]:
        return list(self._routes)

    def route(self, path: str) -> Optional[Route]:
        return self._routes.get(path)

    def nest(self, prefix: str, router: 'Router') -> 'Router':
        """Mount another router's routes under prefix"""
        for path, route in router._routes.items():
            full = prefix + path
            if full in self._routes:
                raise ValueError(f"route already registered: {full}")
            self._routes[full] = Route(full, route.input_type, route.handler, route.api)
        return self

    async def dispatch(self, path: str, ctx: Context, req):
        """Run the operation registered at path.

        Business errors raised by the operation are converted to
        TwirpErrorResponse here; this is the only place the conversion runs.
        """
        route = self._routes.get(path)
        if route is None:
            raise TwirpErrorResponse(ErrorCode.NOT_FOUND, f"no route for {path}")
        error_type = getattr(route.api, "Error", None)
        try:
            return await route.invoke(ctx, req)
        except TwirpErrorResponse:
            raise
        except Exception as e:
            if isinstance(error_type, type) and isinstance(e, error_type):
                raise e.into_twirp_response() from e
            raise

    def __len__(self):
        return len(self._routes)

    def __repr__(self):
        return f"Router({self.paths()!r})"


class TwirpRouterBuilder:
    """Collects routes for one service instance"""

    def __init__(self, api):
        self.api = api
        self._routes: dict[str, Route] = {}

    def route(self, path: str, input_type, handler: Handler) -> 'TwirpRouterBuilder':
        self._routes[path] = Route(path, input_type, handler, self.api)
        return self

    def build(self) -> Router:
        return Router(self._routes)


# ══════════════════════════════════════════════════════════════
# Client
# ══════════════════════════════════════════════════════════════

Transport = Callable[[str, Any, Any], Awaitable[Any]]


class Client:
    """Generic RPC client: joins the base URL with a route path and calls the transport"""

    def __init__(self, base_url: str, transport: Transport):
        self.base_url = base_url.rstrip('/')
        self.transport = transport

    async def request(self, path: str, req, output_type):
        url = self.base_url + path
        try:
            return await self.transport(url, req, output_type)
        except ClientError:
            raise
        except Exception as e:
            raise ClientError(f"request to {url} failed: {e}") from e

    def __repr__(self):
        return f"Client({self.base_url!r})"


class LocalTransport:
    """Transport that dispatches straight into an in-process router"""

    def __init__(self, router: Router, base_url: str = ""):
        self.router = router
        self.base_url = base_url.rstrip('/')

    async def __call__(self, url: str, req, output_type):
        path = url[len(self.base_url):] if url.startswith(self.base_url) else url
        try:
            resp = await self.router.dispatch(path, Context(), req)
        except TwirpErrorResponse as e:
            raise ClientError.from_response(e) from e
        if not isinstance(resp, output_type):
            raise ClientError(f"unexpected response type {type(resp).__name__} for {path}")
        return resp

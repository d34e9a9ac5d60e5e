"""
Request pipeline executed in front of the API routes.

A pipeline is an ordered list of *stages*.  Each stage is an async
callable that receives a :class:`RequestContext` and returns either
:data:`CONTINUE`, to hand the request to the next stage, or a
Starlette :class:`~starlette.responses.Response`, which is sent to the
client immediately and ends processing of the request.

:class:`PipelineMiddleware` plugs a pipeline into the ASGI stack.  The
request body is only read when a stage asks for it through
:meth:`RequestContext.read_body`; whatever was read is replayed to the
application afterwards.  Anything a stage stores in ``context.state``
is visible to route handlers as ``request.state``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Union

from starlette.datastructures import Headers
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class _Continue:
    """Marker type returned by stages that let the request through."""

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE = _Continue()


class BodyTooLarge(Exception):
    """Raised by :meth:`RequestContext.read_body` once the limit is passed."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"body exceeds {limit} bytes")
        self.size = size
        self.limit = limit


@dataclass
class RequestContext:
    """The parts of an HTTP request a stage may look at or annotate."""

    method: str
    path: str
    query_string: str
    headers: Headers
    receive: Receive
    state: Dict[str, Any] = field(default_factory=dict)
    _body: Optional[bytes] = field(default=None, init=False, repr=False)

    @property
    def url(self) -> str:
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @property
    def body(self) -> Optional[bytes]:
        """The buffered body, or ``None`` if no stage has read it."""
        return self._body

    async def read_body(self, limit: Optional[int] = None) -> bytes:
        """Buffer the request body and return it.

        Reading stops as soon as more than ``limit`` bytes have
        arrived, with :class:`BodyTooLarge`.  The request must then be
        answered by the calling stage: the body is left half consumed.
        """
        if self._body is not None:
            return self._body
        chunks: List[bytes] = []
        size = 0
        while True:
            message = await self.receive()
            if message["type"] != "http.request":
                break
            chunk = message.get("body", b"")
            size += len(chunk)
            if limit is not None and size > limit:
                raise BodyTooLarge(size, limit)
            chunks.append(chunk)
            if not message.get("more_body", False):
                break
        self._body = b"".join(chunks)
        return self._body

    @classmethod
    def from_scope(cls, scope: Scope, receive: Receive) -> "RequestContext":
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b"").decode("latin-1"),
            headers=Headers(scope=scope),
            receive=receive,
            state=scope.setdefault("state", {}),
        )


StageResult = Union[_Continue, Response]
Stage = Callable[[RequestContext], Awaitable[StageResult]]


class Pipeline:
    """Ordered collection of stages run in registration order."""

    def __init__(self, stages: Iterable[Stage] = ()) -> None:
        self.stages: List[Stage] = list(stages)

    def add(self, stage: Stage) -> None:
        self.stages.append(stage)

    async def run(self, context: RequestContext) -> StageResult:
        """Run every stage until one of them responds.

        Returns the responding stage's response, or :data:`CONTINUE`
        when all stages let the request through.
        """
        for stage in self.stages:
            result = await stage(context)
            if result is not CONTINUE:
                logger.debug(
                    "Stage %s answered %s %s with status %s",
                    getattr(stage, "__name__", stage),
                    context.method,
                    context.path,
                    result.status_code,
                )
                return result
        return CONTINUE


class PipelineMiddleware:
    """ASGI middleware that runs a :class:`Pipeline` before the app."""

    def __init__(self, app: ASGIApp, stages: Iterable[Stage] = ()) -> None:
        self.app = app
        self.pipeline = Pipeline(stages)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        context = RequestContext.from_scope(scope, receive)
        result = await self.pipeline.run(context)
        if result is not CONTINUE:
            await result(scope, receive, send)
            return

        body = context.body
        if body is None:
            # No stage touched the body: the app streams it itself.
            await self.app(scope, receive, send)
            return

        body_sent = False

        async def replay() -> Message:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

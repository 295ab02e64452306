"""JSON codec that keeps Decimal amounts exact on the wire"""

import json
from decimal import Decimal
from typing import Any, Callable, Coroutine

import simplejson
from fastapi import Request, Response
from fastapi.routing import APIRoute
from starlette.responses import JSONResponse


class DecimalJSONRequest(Request):
    """Request whose JSON body parses fractional numbers as Decimal, not float"""

    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            body = await self.body()
            self._json = json.loads(body, parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    """Route that hands endpoints a DecimalJSONRequest"""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def decimal_route_handler(request: Request) -> Response:
            return await original_route_handler(DecimalJSONRequest(request.scope, request.receive))

        return decimal_route_handler


class DecimalJSONResponse(JSONResponse):
    """JSON response writing Decimal values as exact JSON numbers"""

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")

"""Response classes for the products API."""

from typing import Any

import simplejson
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic_core import to_jsonable_python


class DecimalJSONResponse(JSONResponse):
    """JSON response that writes Decimals as exact JSON numbers.

    The standard encoder goes through ``float``, which would report
    66.66666666666667 for a price stored as 66.6666666666666667.
    """

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            default=to_jsonable_python,
            ensure_ascii=False,
            separators=(",", ":"),
        ).encode("utf-8")


def decimal_json(content: BaseModel | list[BaseModel]) -> DecimalJSONResponse:
    if isinstance(content, list):
        return DecimalJSONResponse([m.model_dump(by_alias=True) for m in content])
    return DecimalJSONResponse(content.model_dump(by_alias=True))

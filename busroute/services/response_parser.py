# busroute/services/response_parser.py
import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import ValidationError

from busroute.core.models import OptimizationResult


class ParseFailure(str, Enum):
    EMPTY_RESPONSE = "empty_response"
    NO_JSON_OBJECT = "no_json_object"
    INVALID_JSON = "invalid_json"
    SCHEMA_MISMATCH = "schema_mismatch"


@dataclass(frozen=True)
class ParseResult:
    """Either a decoded route plan or the reason there is none."""

    value: Optional[OptimizationResult] = None
    failure: Optional[ParseFailure] = None
    detail: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.failure is None

    @classmethod
    def ok(cls, value: OptimizationResult) -> "ParseResult":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: ParseFailure, detail: str = None) -> "ParseResult":
        return cls(failure=failure, detail=detail)


def extract_json_object(text: str) -> Optional[str]:
    """Return the span from the first ``{`` to the last ``}``, if any.

    Models often wrap their JSON in prose or markdown fences, so everything
    outside the outermost braces is discarded.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return text[start : end + 1]


def parse_route_plan(text: Optional[str]) -> ParseResult:
    """Decode a model response into an ``OptimizationResult``.

    Never raises on bad input; every failure mode comes back as a tagged
    ``ParseResult``.
    """
    if text is None or not text.strip():
        return ParseResult.fail(ParseFailure.EMPTY_RESPONSE, "model returned no text")

    candidate = extract_json_object(text)
    if candidate is None:
        return ParseResult.fail(
            ParseFailure.NO_JSON_OBJECT, "no JSON object found in model response"
        )

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        return ParseResult.fail(ParseFailure.INVALID_JSON, str(e))

    try:
        plan = OptimizationResult.model_validate(data)
    except ValidationError as e:
        return ParseResult.fail(ParseFailure.SCHEMA_MISMATCH, str(e))

    return ParseResult.ok(plan)

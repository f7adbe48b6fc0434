import json
import re
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from dsa_companion.config import logger
from dsa_companion.data.repositories import ModelClient
from dsa_companion.errors import ModelProviderException, UpstreamFormatException

ai_logger = logger.getChild("ai")

M = TypeVar("M", bound=BaseModel)

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


def parse_model_json(text: str, schema: Type[M], error_detail: str) -> M:
    """
    Parse a provider reply as JSON and check it against schema.

    A reply wrapped in a single Markdown code fence is unwrapped first.
    """
    body = text.strip()
    fenced = _CODE_FENCE.match(body)
    if fenced:
        body = fenced.group(1)

    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        ai_logger.warning(f"{schema.__name__}: reply is not JSON ({e.msg} at {e.pos})")
        raise UpstreamFormatException(detail=error_detail) from e

    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        ai_logger.warning(f"{schema.__name__}: reply does not match schema: {e.errors()}")
        raise UpstreamFormatException(detail=error_detail) from e


async def request_json(
    client: ModelClient,
    prompt: str,
    temperature: float,
    schema: Type[M],
    empty_detail: str,
    format_detail: str,
) -> M:
    reply = await client.complete(prompt, temperature)
    if not reply or not reply.strip():
        ai_logger.error(f"{schema.__name__}: model provider returned an empty reply")
        raise ModelProviderException(detail=empty_detail)
    return parse_model_json(reply, schema, format_detail)

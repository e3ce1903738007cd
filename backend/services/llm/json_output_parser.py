"""
Robust JSON output parsing for the Gemini-backed AI flows using LangChain.

Gemini is asked for JSON-only output, but responses still arrive wrapped in
markdown fences or with a sentence of chatter around them. These parsers dig
the JSON out and validate it against the flow's pydantic contract.
"""

import json
import re
import logging
from typing import Any, Optional, Type, TypeVar

from langchain_core.output_parsers import PydanticOutputParser, BaseOutputParser
from langchain_core.exceptions import OutputParserException
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class StrictJSONOutputParser(BaseOutputParser[Any]):
    """
    Extracts the first JSON object or array from potentially malformed LLM text.

    Unlike a chat parser there is no plain-text fallback: a flow that gets no
    JSON back has failed.
    """

    def parse(self, text: str) -> Any:
        if not text or not text.strip():
            raise OutputParserException("Empty response from LLM")

        # Strategy 1: direct parse
        try:
            return json.loads(text.strip())
        except json.JSONDecodeError:
            pass

        # Strategy 2: fenced ```json blocks
        fence_match = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text, re.IGNORECASE)
        if fence_match:
            try:
                return json.loads(fence_match.group(1))
            except json.JSONDecodeError:
                pass

        # Strategy 3: outermost braces / brackets, whichever opens first
        candidate = self._outermost_json(text)
        if candidate is not None:
            try:
                return json.loads(candidate)
            except json.JSONDecodeError:
                pass

        raise OutputParserException(f"No JSON found in LLM output: {text[:200]}")

    @staticmethod
    def _outermost_json(text: str) -> Optional[str]:
        starts = [i for i in (text.find("{"), text.find("[")) if i != -1]
        if not starts:
            return None
        start = min(starts)
        closer = "}" if text[start] == "{" else "]"
        end = text.rfind(closer)
        if end <= start:
            return None
        return text[start:end + 1]

    @property
    def _type(self) -> str:
        return "strict_json"


def build_parser(model_cls: Type[T]) -> PydanticOutputParser:
    return PydanticOutputParser(pydantic_object=model_cls)


def format_instructions(model_cls: Type[T]) -> str:
    """JSON schema instructions appended to every flow prompt."""
    return build_parser(model_cls).get_format_instructions()


def parse_flow_output(text: str, model_cls: Type[T], list_key: Optional[str] = None) -> T:
    """
    Parse raw LLM text into model_cls.

    Args:
        text: Raw text from the LLM
        model_cls: Pydantic contract of the flow
        list_key: When the model answers with a bare JSON array, wrap it under this key

    Raises:
        OutputParserException: If no JSON can be extracted or it does not fit the contract
    """
    try:
        return build_parser(model_cls).parse(text)
    except OutputParserException:
        logger.info("json_output_parser: pydantic parser rejected output for %s, trying strict extraction", model_cls.__name__)

    data = StrictJSONOutputParser().parse(text)
    if isinstance(data, list) and list_key:
        data = {list_key: data}
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise OutputParserException(f"LLM output does not match {model_cls.__name__}: {e}") from e

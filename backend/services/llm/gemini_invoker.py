"""
Invoke Google Gemini for the workbench's AI flows.

Every flow sends one free-form prompt and expects a single JSON document back,
so this module only exposes a one-shot async call with a hard timeout.
"""

import asyncio
import logging
import time
from typing import Optional

import google.generativeai as genai

from core.config import AIFlowConfigs, AgentLogConfigs

logger = logging.getLogger(__name__)

_configured_key: Optional[str] = None


class InvokerError(Exception):
    """Raised when the Gemini call fails, times out or returns no text."""
    pass


def _yellow(text: str) -> str:
    return f"\033[33m{text}\033[0m"


def _ensure_configured(api_key: str) -> None:
    global _configured_key
    if _configured_key != api_key:
        genai.configure(api_key=api_key)
        _configured_key = api_key


async def invoke_freeform_prompt_async(
    prompt: str,
    model_name: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
    json_output: bool = True,
) -> str:
    """
    Send a prompt to Gemini and return the raw response text.

    Args:
        prompt: Full prompt (instructions + dynamic parts)
        model_name: Gemini model id, defaults to the configured model
        api_key: Overrides GEMINI_API_KEY
        timeout_seconds: Hard limit for the call, defaults to AI_CALL_TIMEOUT_SECONDS
        json_output: Ask Gemini for application/json output

    Raises:
        InvokerError: On missing key, timeout, blocked response or transport failure
    """
    key = api_key or AIFlowConfigs.API_KEY
    if not key:
        raise InvokerError("GEMINI_API_KEY environment variable not set")

    model_name = model_name or AIFlowConfigs.MODEL
    timeout_seconds = timeout_seconds or AIFlowConfigs.TIMEOUT_SECONDS
    _ensure_configured(key)

    config_kwargs = {
        "temperature": AIFlowConfigs.TEMPERATURE,
        "max_output_tokens": AIFlowConfigs.MAX_OUTPUT_TOKENS,
    }
    if json_output:
        config_kwargs["response_mime_type"] = "application/json"

    model = genai.GenerativeModel(model_name=model_name)
    start_time = time.time()
    logger.info("gemini_invoker: invoking model=%s prompt_chars=%d", model_name, len(prompt))

    try:
        response = await asyncio.wait_for(
            model.generate_content_async(
                prompt,
                generation_config=genai.types.GenerationConfig(**config_kwargs),
            ),
            timeout=timeout_seconds,
        )
    except asyncio.TimeoutError as e:
        raise InvokerError(f"Gemini response timeout after {timeout_seconds} seconds") from e
    except Exception as e:
        raise InvokerError(f"Error calling Gemini API: {e}") from e

    try:
        text = response.text
    except ValueError as e:
        # .text raises when the candidate was blocked or carries no parts
        raise InvokerError(f"Gemini returned no text: {e}") from e

    if not text:
        raise InvokerError("Gemini returned an empty response")

    elapsed = time.time() - start_time
    logger.info("gemini_invoker: model=%s answered chars=%d in %.2fs", model_name, len(text), elapsed)
    if AgentLogConfigs.LOG_AGENT_RAW_OUTPUT:
        preview = text
        if len(preview) > AgentLogConfigs.LOG_AGENT_RAW_OUTPUT_MAX_LENGTH:
            preview = preview[:AgentLogConfigs.LOG_AGENT_RAW_OUTPUT_MAX_LENGTH] + "... [TRUNCATED]"
        logger.info(_yellow("gemini_invoker: RAW output:\n%s"), preview)
    return text

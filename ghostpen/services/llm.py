# ghostpen/services/llm.py
import asyncio
import logging

import httpx
from openai import AsyncOpenAI, OpenAIError

from ghostpen.core import config
from ghostpen.models.llm import LlmStatus, RewriteMode, RewriteResult
from ghostpen.services import audit, providers
from ghostpen.services.parse import parse_response
from ghostpen.services.prompts import build_messages
from ghostpen.services.providers import NoProviderError, ProviderDescriptor, detect_provider

log = logging.getLogger("llm")


class RewriteError(RuntimeError):
    ...


def _content(resp) -> str:
    """Text of the first choice. A response without choices is an empty rewrite."""
    try:
        choices = resp.choices
    except AttributeError as e:
        raise RewriteError(f"Malformed response from local LLM: {e}") from e
    if not choices:
        return ""
    try:
        return (choices[0].message.content or "").strip()
    except (AttributeError, TypeError) as e:
        raise RewriteError(f"Malformed response from local LLM: {e}") from e


async def _chat(target: ProviderDescriptor, messages: list) -> str:
    """Single non-streaming call to <base>/v1/chat/completions."""
    log.info("LLM chat call provider=%s model=%s, messages=%d",
             target.name, target.default_model, len(messages))
    async with providers.http_client(config.COMPLETION_TIMEOUT) as http:
        client = AsyncOpenAI(
            base_url=target.api_base,
            api_key=config.LOCAL_API_KEY,
            timeout=config.COMPLETION_TIMEOUT,
            max_retries=0,  # no retry, no switching providers mid-request
            http_client=http,
        )
        try:
            # overall deadline; the client timeout only bounds each phase
            resp = await asyncio.wait_for(
                client.chat.completions.create(
                    model=target.default_model,
                    messages=messages,
                    stream=False,
                    temperature=config.REWRITE_TEMPERATURE,
                ),
                config.COMPLETION_TIMEOUT,
            )
        except asyncio.TimeoutError as e:
            raise RewriteError(
                f"{target.name} did not answer within {config.COMPLETION_TIMEOUT:.0f}s"
            ) from e
        except (OpenAIError, httpx.HTTPError) as e:
            raise RewriteError(f"{target.name} request failed: {e}") from e
    return _content(resp)


async def rewrite(text: str, mode) -> RewriteResult:
    """
    detect provider -> build prompt -> one completion -> parse, strictly in
    that order. Raises NoProviderError or RewriteError; one audit event
    either way.
    """
    mode_tag = mode.value if isinstance(mode, RewriteMode) else str(mode)
    details = {"mode": mode_tag, "text_length": len(text)}
    try:
        target = await detect_provider()
        messages = build_messages(text, mode)
        rewritten, explanation = parse_response(await _chat(target, messages))
    except (NoProviderError, RewriteError) as e:
        audit.record("rewrite", {**details, "success": False, "error": str(e)})
        raise
    audit.record("rewrite", {**details, "success": True, "provider": target.name})
    log.info("Rewrite ok: mode=%s, %d -> %d chars, explanation=%s",
             mode_tag, len(text), len(rewritten), bool(explanation))
    return RewriteResult(rewritten=rewritten, explanation=explanation)


async def check_status() -> LlmStatus:
    """Fresh probe on every call; no server is a normal answer, not an error."""
    try:
        target = await detect_provider()
    except NoProviderError:
        return LlmStatus(available=False, provider="none", model="")
    return LlmStatus(available=True, provider=target.name, model=target.default_model)

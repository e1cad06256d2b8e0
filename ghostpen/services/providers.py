# ghostpen/services/providers.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple

import httpx

from ghostpen.core import config

log = logging.getLogger("providers")


class Provider(str, Enum):
    LMSTUDIO = "LM Studio"
    OLLAMA = "Ollama"


class NoProviderError(RuntimeError):
    ...


@dataclass(frozen=True)
class ProviderDescriptor:
    provider: Provider
    base_url: str
    default_model: str
    probe_path: str

    @property
    def name(self) -> str:
        return self.provider.value

    @property
    def probe_url(self) -> str:
        return self.base_url.rstrip("/") + self.probe_path

    @property
    def api_base(self) -> str:
        # both servers expose the OpenAI-compatible API under /v1
        return self.base_url.rstrip("/") + "/v1"


def candidates() -> Tuple[ProviderDescriptor, ...]:
    """Known local servers in probe order. LM Studio wins when both are up."""
    return (
        ProviderDescriptor(Provider.LMSTUDIO, config.LMSTUDIO_URL, config.LMSTUDIO_MODEL, "/v1/models"),
        ProviderDescriptor(Provider.OLLAMA, config.OLLAMA_URL, config.OLLAMA_MODEL, "/"),
    )


def http_client(timeout: float) -> httpx.AsyncClient:
    """Every outgoing request goes through a client built here."""
    return httpx.AsyncClient(timeout=timeout)


async def _probe(client: httpx.AsyncClient, candidate: ProviderDescriptor) -> bool:
    # httpx timeouts are per phase; wait_for caps the whole request
    try:
        resp = await asyncio.wait_for(client.get(candidate.probe_url), config.PROBE_TIMEOUT)
    except asyncio.TimeoutError:
        log.debug("Probe %s timed out after %.1fs", candidate.probe_url, config.PROBE_TIMEOUT)
        return False
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        log.debug("Probe %s failed: %s", candidate.probe_url, e)
        return False
    if not resp.is_success:
        log.debug("Probe %s answered %d", candidate.probe_url, resp.status_code)
        return False
    return True


async def detect_provider(
    make_client: Callable[[float], httpx.AsyncClient] | None = None,
) -> ProviderDescriptor:
    """
    Return the first reachable local server, probing in fixed priority order.
    Each probe is a cheap GET bounded by PROBE_TIMEOUT; any failure just means
    that candidate is absent.
    """
    make_client = make_client or http_client
    async with make_client(config.PROBE_TIMEOUT) as client:
        for candidate in candidates():
            if await _probe(client, candidate):
                log.info("Using %s at %s", candidate.name, candidate.base_url)
                return candidate
    log.warning("No local LLM server answered")
    raise NoProviderError("No LLM server found. Install Ollama or LM Studio.")

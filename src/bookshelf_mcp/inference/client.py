"""
Text generation for the Bookshelf MCP Server.

The searchBooks tool sends a chat-style message list to a hosted model and
returns whatever text comes back. The default backend is Cloudflare Workers
AI reached through its REST API:

    POST {base_url}/accounts/{account_id}/ai/run/{model}
    {"messages": [{"role": "system", ...}, {"role": "user", ...}]}

The response envelope is ``{"result": ..., "success": true, ...}``; the
``result`` member is what a Workers AI binding would have returned, usually
``{"response": "..."}``.

One blocking call per search: no retries, no streaming. HTTP errors are
raised to the caller unchanged.
"""

import json
import logging
from typing import Any, Literal, Protocol

import httpx
from pydantic import BaseModel

from ..config import ServerConfig

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    """A single turn of a chat conversation."""

    role: Literal["system", "user", "assistant"]
    content: str


class InferenceClient(Protocol):
    """Anything able to run a chat conversation through a model."""

    async def run(self, messages: list[ChatMessage]) -> Any: ...


class WorkersAIClient:
    """Runs chat completions on Cloudflare Workers AI."""

    def __init__(
        self,
        account_id: str | None,
        api_token: str | None,
        model: str,
        base_url: str = "https://api.cloudflare.com/client/v4",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.account_id = account_id
        self.api_token = api_token
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: ServerConfig) -> "WorkersAIClient":
        return cls(
            account_id=config.inference_account_id,
            api_token=config.inference_api_token,
            model=config.inference_model,
            base_url=config.inference_base_url,
            timeout=config.inference_timeout,
        )

    @property
    def configured(self) -> bool:
        return bool(self.account_id and self.api_token)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/accounts/{self.account_id}/ai/run/{self.model}"

    async def run(self, messages: list[ChatMessage]) -> Any:
        """POST the conversation and return the ``result`` member of the envelope."""
        if not self.configured:
            raise RuntimeError(
                "Inference credentials missing: set BOOKSHELF_INFERENCE_ACCOUNT_ID "
                "and BOOKSHELF_INFERENCE_API_TOKEN"
            )

        payload = {"messages": [message.model_dump() for message in messages]}
        headers = {"Authorization": f"Bearer {self.api_token}"}

        logger.debug("Running %s with %d message(s)", self.model, len(messages))

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.endpoint, json=payload, headers=headers)
            response.raise_for_status()

        body = response.json()
        if isinstance(body, dict):
            return body.get("result", body)
        return body


def normalize_response(response: Any) -> str:
    """Strings pass through, structured responses become compact JSON."""
    if isinstance(response, str):
        return response
    return json.dumps(response, separators=(",", ":"), ensure_ascii=False)


async def generate_text(client: InferenceClient, messages: list[ChatMessage]) -> str:
    return normalize_response(await client.run(messages))

"""
Faithtrack Backend: Grok (xAI) Guidance Service
=================================================

What:  Sends a user's faith question to the xAI chat-completion API and
       records the answer in their search history.
How:   One async httpx POST with a fixed system prompt and the user's own
       API key; the parsed answer is persisted via SearchHistoryService.
Who:   Called by POST /api/search.

Request Shape:
    POST {settings.grok_api_url}
    Authorization: Bearer <caller's key>
    {
        "model": settings.grok_model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": <query>}
        ],
        "temperature": 0.7
    }

Outcomes:
    non-2xx status          → UpstreamError with the body text verbatim
    network failure/timeout → UpstreamError
    2xx, body not JSON      → UpstreamError
    2xx, JSON missing choices[0].message.content
                            → UNAVAILABLE_ANSWER (logged as a warning)
    2xx, answer present     → answer

    History is written only once an answer (real or placeholder) exists, so a
    failed call never leaves a record behind.

Single Round Trip:
    There is no retry, no streaming and no rate limiting. The only timeout is
    the client-wide settings.grok_timeout_seconds.

Credential Handling:
    The API key arrives with every call, is placed in the Authorization
    header of that single request, and is never logged or stored.
"""

import logging
import time
import uuid
from typing import Any, Optional

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.config import settings
from faithtrack.exceptions import MalformedUpstreamResponse, UpstreamError
from faithtrack.services.llm_base import GuidanceLLM
from faithtrack.services.search_history_service import search_history_service

logger = logging.getLogger(__name__)

# Answer returned (and saved) when a successful response has no usable content
UNAVAILABLE_ANSWER = "Unable to get response"


class GrokService(GuidanceLLM):
    """
    xAI Grok implementation of GuidanceLLM plus the search orchestration.

    Args:
        transport: Optional httpx transport. Tests pass httpx.MockTransport;
                   production leaves it None for the default network transport.
    """

    SYSTEM_PROMPT = """You are a helpful Christian spiritual advisor and Bible scholar.
Answer questions about faith, scripture, Christian living, and spiritual guidance with wisdom and compassion.
Always ground your answers in Biblical truth while being loving and understanding.
If asked about specific Bible verses, provide the full text and context.
Keep responses concise but meaningful, around 2-3 paragraphs."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    def build_payload(self, query: str) -> dict:
        """JSON body for the chat-completion request."""
        return {
            "model": settings.grok_model,
            "messages": [
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": query},
            ],
            "temperature": settings.grok_temperature,
        }

    async def ask(self, query: str, api_key: str) -> str:
        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()

        logger.info("[%s] Sending guidance query (%d chars) to Grok", request_id, len(query))

        try:
            async with httpx.AsyncClient(
                timeout=settings.grok_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    settings.grok_api_url,
                    json=self.build_payload(query),
                    headers={"Authorization": f"Bearer {api_key}"},
                )
        except httpx.HTTPError as e:
            logger.error(
                "[%s] Grok request failed after %.0fms: %s",
                request_id,
                (time.time() - start_time) * 1000,
                type(e).__name__,
            )
            raise UpstreamError(
                message=f"Could not reach the Grok API: {type(e).__name__}",
                context={"request_id": request_id},
            ) from e

        duration_ms = (time.time() - start_time) * 1000

        if not response.is_success:
            body = response.text
            logger.warning(
                "[%s] Grok returned HTTP %d after %.0fms",
                request_id,
                response.status_code,
                duration_ms,
            )
            raise UpstreamError(
                message=f"Grok API error: {body}",
                status_code=response.status_code,
                body=body,
                context={"request_id": request_id},
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("[%s] Grok returned a non-JSON body", request_id)
            raise UpstreamError(
                message="Grok API returned a response that is not JSON",
                status_code=response.status_code,
                body=response.text,
                context={"request_id": request_id},
            ) from e

        try:
            answer = self.extract_answer(data)
        except MalformedUpstreamResponse as e:
            logger.warning("[%s] %s; using placeholder answer", request_id, e.message)
            answer = UNAVAILABLE_ANSWER

        logger.info(
            "[%s] Grok answered in %.0fms (%d chars)",
            request_id,
            duration_ms,
            len(answer),
        )
        return answer

    @staticmethod
    def extract_answer(data: Any) -> str:
        """
        Pull choices[0].message.content out of a chat-completion body.

        Raises:
            MalformedUpstreamResponse: the path is missing, or the content is
                not a non-empty string
        """
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            raise MalformedUpstreamResponse()

        if not isinstance(content, str) or not content:
            raise MalformedUpstreamResponse(
                message="The AI guidance service returned an empty answer",
            )
        return content

    async def search_with_grok(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        query: str,
        api_key: str,
    ) -> str:
        """
        Ask Grok and record the answer in the caller's search history.

        The upstream call happens first; the save step then requires a caller,
        so an anonymous request fails with UnauthenticatedError after the
        round trip and nothing is stored.

        Returns:
            The answer text (or UNAVAILABLE_ANSWER).

        Raises:
            UpstreamError: the upstream call failed (history unchanged)
            UnauthenticatedError: no caller identity at the save step
        """
        answer = await self.ask(query, api_key)
        await search_history_service.save_search(db, caller_id, query=query, response=answer)
        return answer


# ── Singleton Instance ────────────────────────────────────────────────────
grok_service = GrokService()

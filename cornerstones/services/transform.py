from __future__ import annotations

from typing import Optional

import httpx

from cornerstones.assessments.constants import VARK_STYLES
from cornerstones.assessments.vark.styles import format_style_name
from cornerstones.core.config import settings
from cornerstones.core.errors import ConfigurationError, UpstreamServiceError, ValidationError
from cornerstones.core.logging import get_logger
from cornerstones.core.metrics import count_calls, inc_counter, timer
from cornerstones.i18n.messages import TransformMessages

logger = get_logger("cornerstones.services.transform", component="service")

_ATTEMPTS = 2


class ContentTransformClient:
    """HTTP client for the external text-transformation service.

    Contract: POST {base_url}/api/transform
    Request JSON: {"text": str, "style": "Visual" | "Auditory" | "Reading/Writing" | "Kinesthetic", "subject": str}
    Response JSON: {"content": str}
    """

    def __init__(
        self,
        base_url: Optional[str],
        timeout_ms: int = 30_000,
        api_key: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = max(100, int(timeout_ms)) / 1000.0  # seconds
        self.api_key = api_key
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["X-API-Key"] = self.api_key
        return headers

    def _post(self, payload: dict) -> httpx.Response:
        url = f"{self.base_url}/api/transform"
        last_exc: Exception | None = None
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            # Retry transport failures once; HTTP error statuses are not retried.
            for _ in range(_ATTEMPTS):
                try:
                    with timer("transform.request"):
                        return client.post(url, json=payload, headers=self._headers())
                except httpx.TimeoutException as exc:
                    last_exc = exc
                    inc_counter("transform.timeout")
                except httpx.TransportError as exc:
                    last_exc = exc
                    inc_counter("transform.transport_error")
        if isinstance(last_exc, httpx.TimeoutException):
            raise UpstreamServiceError(TransformMessages.UPSTREAM_TIMEOUT) from last_exc
        raise UpstreamServiceError(
            TransformMessages.UPSTREAM_FAILED, detail={"reason": str(last_exc)}
        ) from last_exc

    @count_calls("transform.calls")
    def transform(self, text: str, style: str, subject: Optional[str] = None) -> str:
        """Return ``text`` rewritten for ``style`` (a VARK tag)."""
        if not self.enabled:
            raise ConfigurationError(TransformMessages.NOT_CONFIGURED)
        if style not in VARK_STYLES:
            raise ValidationError(
                "Unknown learning style", detail={"style": style, "allowed": list(VARK_STYLES)}
            )
        payload = {
            "text": text,
            "style": format_style_name(style),
            "subject": subject or settings.content_transform_default_subject,
        }
        resp = self._post(payload)
        if resp.status_code >= 400:
            logger.warning(
                "transform_upstream_error",
                extra={"structured_data": {"status": resp.status_code, "style": style}},
            )
            raise UpstreamServiceError(
                TransformMessages.UPSTREAM_FAILED, detail={"status": resp.status_code}
            )
        try:
            content = resp.json().get("content")
        except (ValueError, AttributeError) as exc:
            raise UpstreamServiceError(TransformMessages.MALFORMED_RESPONSE) from exc
        if not isinstance(content, str):
            raise UpstreamServiceError(TransformMessages.MALFORMED_RESPONSE)
        logger.info(
            "transform_completed",
            extra={"structured_data": {"style": style, "chars_in": len(text), "chars_out": len(content)}},
        )
        return content


def build_transform_client() -> ContentTransformClient:
    base = settings.content_transform_base_url
    return ContentTransformClient(
        base_url=str(base) if base else None,
        timeout_ms=settings.content_transform_timeout_ms,
        api_key=settings.content_transform_api_key,
    )


def get_transform_client() -> ContentTransformClient:
    """FastAPI dependency; tests override it with a mock transport."""
    return build_transform_client()

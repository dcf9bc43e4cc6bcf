"""Cliente HTTP base para conectores da camada API.

Uma única tentativa por chamada: sem retry e sem backoff. Falhas de
transporte viram HttpError; respostas não-2xx são devolvidas ao chamador,
que decide como tratá-las.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    # Injetável para testes (httpx.MockTransport)
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Falha de transporte sem dados sensíveis (URL, token, payload)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_timeout: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_timeout = is_timeout


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    @property
    def timeout_seconds(self) -> float:
        return self._config.timeout_seconds

    async def post(
        self,
        url: str,
        *,
        json: Any = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST único; devolve a resposta qualquer que seja o status.

        Raises:
            HttpError: Timeout ou falha de conexão/protocolo.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._config.transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    data=data,
                    headers=merged_headers,
                )
        except httpx.TimeoutException as exc:
            logger.warning(
                "http_timeout",
                extra={"timeout_seconds": self._config.timeout_seconds},
            )
            raise HttpError("http_timeout", is_timeout=True) from exc
        except httpx.HTTPError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise HttpError("http_connection_error") from exc

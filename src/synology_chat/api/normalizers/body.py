"""Normalização do body inbound em mensagem canônica.

O outgoing webhook do Synology Chat chega em duas codificações:

1. JSON (`application/json`): o body já é a mensagem.
2. Form (`application/x-www-form-urlencoded`):
   - com campo `payload`: o valor é JSON (callbacks de botão) e vira a
     mensagem, descartando os demais campos;
   - sem `payload`: os pares chave/valor viram um dict de strings, sem
     coerção de tipos (o validador decide depois).

O normalizer não conhece a rota que o chamou e nunca altera a entrada.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qsl

from synology_chat.utils.errors import MalformedBodyError, UnsupportedContentTypeError

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
JSON_MEDIA_TYPE = "application/json"

# Campo do form que carrega a mensagem codificada em JSON
PAYLOAD_FIELD = "payload"

DEFAULT_CHARSET = "utf-8"


def parse_content_type(header: str | None) -> tuple[str, str]:
    """Separa media type e charset de um header Content-Type.

    Returns:
        (media_type em minúsculas, charset); charset padrão utf-8.
    """
    if not header:
        return "", DEFAULT_CHARSET

    media_type, *params = header.split(";")
    charset = DEFAULT_CHARSET
    for param in params:
        key, _, value = param.partition("=")
        if key.strip().lower() == "charset" and value.strip():
            charset = value.strip().strip('"').lower()
    return media_type.strip().lower(), charset


def is_json_media_type(media_type: str) -> bool:
    """True para application/json e sufixos estruturados (+json)."""
    return media_type == JSON_MEDIA_TYPE or media_type.endswith("+json")


def normalize_body(raw_body: bytes, content_type: str | None) -> Any:
    """Converte o body bruto em mensagem canônica.

    Args:
        raw_body: Corpo bruto do request.
        content_type: Header Content-Type declarado.

    Returns:
        Novo valor com a mensagem canônica (dict para mensagens bem
        formadas; qualquer outro valor JSON segue para o validador).

    Raises:
        MalformedBodyError: Body vazio, JSON inválido ou `payload` inválido.
        UnsupportedContentTypeError: Content-Type ausente ou não suportado.
    """
    media_type, charset = parse_content_type(content_type)

    if is_json_media_type(media_type):
        return _parse_json(raw_body, charset)
    if media_type == FORM_MEDIA_TYPE:
        return _normalize_form(raw_body, charset)

    raise UnsupportedContentTypeError(f"unsupported_content_type: {media_type or 'missing'}")


def _normalize_form(raw_body: bytes, charset: str) -> Any:
    text = _decode(raw_body, charset)
    if not text.strip():
        raise MalformedBodyError("empty_body")

    # Chave repetida: o último valor prevalece
    fields = dict(parse_qsl(text, keep_blank_values=True, encoding=charset))

    if PAYLOAD_FIELD in fields:
        return _parse_json(fields[PAYLOAD_FIELD], charset)
    return fields


def _parse_json(raw: bytes | str, charset: str) -> Any:
    if isinstance(raw, bytes):
        raw = _decode(raw, charset)
    if not raw.strip():
        raise MalformedBodyError("empty_body")

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedBodyError("invalid_json") from exc


def _decode(raw_body: bytes, charset: str) -> str:
    try:
        return raw_body.decode(charset)
    except (LookupError, UnicodeDecodeError) as exc:
        raise MalformedBodyError("invalid_encoding") from exc

"""Normalizers — body bruto do webhook para mensagem canônica.

Uso:
    from synology_chat.api.normalizers import normalize_body

    message = normalize_body(b"text=Hello", "application/x-www-form-urlencoded")
"""

from synology_chat.api.normalizers.body import (
    FORM_MEDIA_TYPE,
    JSON_MEDIA_TYPE,
    PAYLOAD_FIELD,
    normalize_body,
    parse_content_type,
)

__all__ = [
    "FORM_MEDIA_TYPE",
    "JSON_MEDIA_TYPE",
    "PAYLOAD_FIELD",
    "normalize_body",
    "parse_content_type",
]

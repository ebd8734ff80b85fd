"""Basic auth para el portal.

El header se construye con los bytes UTF-8 de `key:secret`, de modo que las
credenciales con caracteres multibyte se decodifican igual en el servidor.
"""

from __future__ import annotations

import base64

from core.domain.models import KeypairEntry


def keypair_to_auth(key: str, secret: str) -> str:
    """Convierte key + secret en el valor del header `Authorization`."""

    token = base64.b64encode(f"{key}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def auth_from_keypair(entry: KeypairEntry) -> str:
    return keypair_to_auth(entry.key, entry.secret)

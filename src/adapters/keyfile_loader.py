"""Carga del keyfile (servidores + credenciales).

Formato:
    {"localhost": {"server": "http://localhost:6543", "key": "...", "secret": "..."}, ...}

Errores:
- Fichero inexistente/ilegible, JSON inválido o esquema incorrecto -> `KeyfileError`.
- Entrada inexistente -> `ConfigError`.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from core.domain.models import KeypairEntry, Keyfile
from core.errors import ConfigError, KeyfileError


def load_keyfile(path: Path) -> Keyfile:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise KeyfileError(path, exc.strerror or str(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise KeyfileError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    try:
        return Keyfile.model_validate(data)
    except ValidationError as exc:
        raise KeyfileError(path, f"invalid schema ({exc.error_count()} error(s))") from exc


def resolve_keypair(keyfile: Keyfile, name: str) -> KeypairEntry:
    """Devuelve la entrada `name` del keyfile."""

    try:
        return keyfile.root[name]
    except KeyError:
        raise ConfigError(f"unknown key: {name}") from None


def load_keypair(path: Path, name: str) -> KeypairEntry:
    return resolve_keypair(load_keyfile(path), name)

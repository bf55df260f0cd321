"""Loading Kubernetes manifests into flat lists of resources."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Iterator, Union

import yaml


class ManifestError(ValueError):
    """Raised when a manifest cannot be decoded."""


def _json_documents(text: str) -> Iterator[Any]:
    decoder = json.JSONDecoder()
    pos = 0
    while True:
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            return
        obj, pos = decoder.raw_decode(text, pos)
        yield obj


def _documents(text: str) -> list[Any]:
    try:
        if text.lstrip().startswith("{"):
            return list(_json_documents(text))
        return list(yaml.safe_load_all(text))
    except (ValueError, yaml.YAMLError) as exc:
        raise ManifestError(f"decoding manifest: {exc}") from exc


def new_list(data: Union[str, bytes]) -> list[dict]:
    """Decode YAML or JSON documents into a flat list of resources."""
    if isinstance(data, (bytes, bytearray)):
        data = data.decode()
    items: list[dict] = []
    for document in _documents(data):
        if document is None:
            continue
        append_flattened(items, document)
    return items


def append_flattened(items: list[dict], component: Any) -> None:
    """Append ``component`` to ``items``, flattening any nested lists.

    ``component`` is a decoded resource mapping, or raw YAML/JSON text.
    """
    if isinstance(component, (str, bytes, bytearray)):
        raw = component.decode() if isinstance(component, (bytes, bytearray)) else component
        try:
            component = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ManifestError(f"decoding object: {exc}") from exc
    if not isinstance(component, Mapping):
        raise ManifestError("decoding object: object is not a mapping")
    if not component.get("kind"):
        raise ManifestError("decoding object: Object 'Kind' is missing")
    if not component.get("apiVersion"):
        raise ManifestError("decoding object: Object 'apiVersion' is missing")

    if str(component["kind"]).endswith("List"):
        for item in component.get("items") or []:
            append_flattened(items, item)
        return
    items.append(dict(component))
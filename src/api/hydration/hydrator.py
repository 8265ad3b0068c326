"""Hidratação estrutural de JSON em tipos de domínio.

Conduzida exclusivamente por descritores (api.hydration.shapes).
Qualquer divergência entre o JSON e o shape declarado levanta
HydrationError com o caminho do campo: retornar um objeto parcialmente
hidratado mascararia drift de protocolo.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from api.hydration.shapes import (
    ArrayShape,
    EnumShape,
    NullableShape,
    ObjectShape,
    RefShape,
    ScalarShape,
    Shape,
    UnionShape,
    shape_named,
)
from utils.errors import HydrationError

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "integer",
    float: "number",
    type(None): "null",
}


def _json_type(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def hydrate(raw: Any, shape: Shape, path: str = "result") -> Any:
    """Converte JSON bruto no valor tipado descrito por `shape`.

    Args:
        raw: Valor JSON decodificado
        shape: Descritor alvo
        path: Caminho para mensagens de erro

    Returns:
        Valor tipado (escalar, enum, objeto, lista ou None)

    Raises:
        HydrationError: Se o JSON não corresponde ao shape
    """
    if isinstance(shape, RefShape):
        return hydrate(raw, shape_named(shape.name), path)
    if isinstance(shape, NullableShape):
        return None if raw is None else hydrate(raw, shape.inner, path)
    if isinstance(shape, ScalarShape):
        return _hydrate_scalar(raw, shape, path)
    if isinstance(shape, EnumShape):
        return _hydrate_enum(raw, shape.enum_type, path)
    if isinstance(shape, ArrayShape):
        if not isinstance(raw, list):
            raise HydrationError(f"esperado array, recebido {_json_type(raw)}", path=path)
        return [hydrate(item, shape.item, f"{path}[{i}]") for i, item in enumerate(raw)]
    if isinstance(shape, UnionShape):
        return _hydrate_union(raw, shape, path)
    if isinstance(shape, ObjectShape):
        return _hydrate_object(raw, shape, path)
    raise TypeError(f"Shape não suportado: {type(shape).__name__}")


def _hydrate_scalar(raw: Any, shape: ScalarShape, path: str) -> Any:
    kind = shape.kind
    if kind == "any":
        return raw
    if kind == "bool":
        ok = isinstance(raw, bool)
    elif kind == "int":
        ok = isinstance(raw, int) and not isinstance(raw, bool)
    elif kind == "float":
        ok = isinstance(raw, (int, float)) and not isinstance(raw, bool)
        if ok:
            return float(raw)
    elif kind == "str":
        ok = isinstance(raw, str)
    else:
        raise TypeError(f"Escalar desconhecido: {kind}")
    if not ok:
        raise HydrationError(f"esperado {kind}, recebido {_json_type(raw)}", path=path)
    return raw


def _hydrate_enum(raw: Any, enum_type: type[Enum], path: str) -> Enum:
    for member in enum_type:
        # bool nunca casa com backing int
        if member.value == raw and type(member.value) is type(raw):
            return member
    raise HydrationError(f"valor desconhecido para {enum_type.__name__}: {raw!r}", path=path)


def _hydrate_union(raw: Any, shape: UnionShape, path: str) -> Any:
    if not isinstance(raw, dict):
        raise HydrationError(f"esperado object ({shape.name}), recebido {_json_type(raw)}", path=path)
    tag = raw.get(shape.discriminant)
    variant = shape.variants.get(tag) if isinstance(tag, str) else None
    if variant is None:
        raise HydrationError(
            f"discriminante {shape.discriminant}={tag!r} sem variante em {shape.name}",
            path=path,
        )
    return hydrate(raw, variant, path)


def _hydrate_object(raw: Any, shape: ObjectShape, path: str) -> Any:
    if not isinstance(raw, dict):
        raise HydrationError(f"esperado object ({shape.name}), recebido {_json_type(raw)}", path=path)
    kwargs: dict[str, Any] = {}
    for spec in shape.fields:
        field_path = f"{path}.{spec.key}"
        if spec.key not in raw:
            if not spec.optional:
                raise HydrationError(f"campo obrigatório ausente em {shape.name}", path=field_path)
            kwargs[spec.attribute] = None
            continue
        kwargs[spec.attribute] = hydrate(raw[spec.key], spec.shape, field_path)
    return shape.factory(**kwargs)

"""Hidratação de respostas da Bot API.

- shapes: descritores estáticos e tabela de registro
- hydrator: conversão JSON -> tipos de domínio
"""

from api.hydration.hydrator import hydrate
from api.hydration.shapes import (
    ANY,
    BOOL,
    FLOAT,
    INT,
    STR,
    ArrayShape,
    EnumShape,
    FieldSpec,
    NullableShape,
    ObjectShape,
    RefShape,
    ScalarShape,
    Shape,
    UnionShape,
    array_of,
    dump_value,
    enum_of,
    nullable,
    optional,
    ref,
    register_object,
    register_union,
    required,
    shape_named,
    shape_of,
)

__all__ = [
    "ANY",
    "BOOL",
    "FLOAT",
    "INT",
    "STR",
    "ArrayShape",
    "EnumShape",
    "FieldSpec",
    "NullableShape",
    "ObjectShape",
    "RefShape",
    "ScalarShape",
    "Shape",
    "UnionShape",
    "array_of",
    "dump_value",
    "enum_of",
    "hydrate",
    "nullable",
    "optional",
    "ref",
    "register_object",
    "register_union",
    "required",
    "shape_named",
    "shape_of",
]

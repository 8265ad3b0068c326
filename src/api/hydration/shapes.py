"""Descritores de shape para hidratação e serialização de tipos da API.

Um shape descreve, como dado estático, como converter JSON bruto em valor
tipado (e o caminho inverso para parâmetros de saída). A tabela de shapes
é registrada uma única vez na importação de `api.types`; nada aqui consulta
anotações de tipo em tempo de execução.

Tipos de shape:
    - ScalarShape: int, float, str, bool ou any
    - EnumShape: enum com valor de backing
    - ObjectShape: objeto com campos declarados (FieldSpec)
    - ArrayShape: lista de outro shape
    - NullableShape: aceita null como ausência
    - UnionShape: variantes selecionadas por campo discriminante
    - RefShape: referência por nome (tipos recursivos, ex: Message)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class Shape:
    """Base de todos os descritores."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class ScalarShape(Shape):
    """Escalar JSON com checagem de tipo.

    Attributes:
        kind: "int", "float", "str", "bool" ou "any"
    """

    kind: str


@dataclass(frozen=True, slots=True)
class EnumShape(Shape):
    """Enum cujo valor JSON é o valor de backing."""

    enum_type: type[Enum]


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Campo declarado de um ObjectShape.

    Attributes:
        key: Nome do campo no JSON
        shape: Shape do valor
        attr: Nome do atributo Python (default: key)
        optional: Se ausência no JSON é permitida
    """

    key: str
    shape: Shape
    attr: str = ""
    optional: bool = False

    @property
    def attribute(self) -> str:
        return self.attr or self.key


@dataclass(frozen=True, slots=True)
class ObjectShape(Shape):
    """Objeto com campos tipados construído por `factory(**kwargs)`."""

    name: str
    factory: Callable[..., Any]
    fields: tuple[FieldSpec, ...]


@dataclass(frozen=True, slots=True)
class ArrayShape(Shape):
    item: Shape


@dataclass(frozen=True, slots=True)
class NullableShape(Shape):
    inner: Shape


@dataclass(frozen=True, slots=True)
class UnionShape(Shape):
    """União discriminada.

    Attributes:
        name: Nome da união (para mensagens de erro)
        discriminant: Campo JSON que seleciona a variante
        variants: Valor do discriminante -> shape da variante
    """

    name: str
    discriminant: str
    variants: Mapping[str, Shape] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RefShape(Shape):
    """Referência tardia a um shape registrado pelo nome do tipo."""

    name: str


INT = ScalarShape("int")
FLOAT = ScalarShape("float")
STR = ScalarShape("str")
BOOL = ScalarShape("bool")
ANY = ScalarShape("any")

# Tabela estática: nome do tipo -> shape, e classe -> shape
_SHAPES_BY_NAME: dict[str, Shape] = {}
_SHAPES_BY_TYPE: dict[type, ObjectShape] = {}


def required(key: str, shape: Shape, attr: str = "") -> FieldSpec:
    """Campo obrigatório."""
    return FieldSpec(key=key, shape=shape, attr=attr)


def optional(key: str, shape: Shape, attr: str = "") -> FieldSpec:
    """Campo opcional; ausente ou null vira None."""
    return FieldSpec(key=key, shape=NullableShape(shape), attr=attr, optional=True)


def array_of(shape: Shape) -> ArrayShape:
    return ArrayShape(shape)


def nullable(shape: Shape) -> NullableShape:
    return NullableShape(shape)


def enum_of(enum_type: type[Enum]) -> EnumShape:
    return EnumShape(enum_type)


def ref(name: str) -> RefShape:
    return RefShape(name)


def register_object(cls: type, *fields: FieldSpec) -> ObjectShape:
    """Registra o shape de um tipo de domínio.

    Args:
        cls: Classe construída com kwargs (dataclass)
        *fields: Campos declarados

    Returns:
        ObjectShape registrado

    Raises:
        ValueError: Se o tipo já foi registrado
    """
    name = cls.__name__
    if name in _SHAPES_BY_NAME:
        raise ValueError(f"Shape já registrado: {name}")
    shape = ObjectShape(name=name, factory=cls, fields=tuple(fields))
    _SHAPES_BY_NAME[name] = shape
    _SHAPES_BY_TYPE[cls] = shape
    return shape


def register_union(name: str, discriminant: str, variants: Mapping[str, Shape]) -> UnionShape:
    """Registra uma união discriminada pelo nome."""
    if name in _SHAPES_BY_NAME:
        raise ValueError(f"Shape já registrado: {name}")
    shape = UnionShape(name=name, discriminant=discriminant, variants=dict(variants))
    _SHAPES_BY_NAME[name] = shape
    return shape


def shape_named(name: str) -> Shape:
    """Resolve um shape pelo nome registrado.

    Raises:
        KeyError: Se o nome não está registrado
    """
    try:
        return _SHAPES_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Shape não registrado: {name}") from None


def shape_of(cls: type) -> ObjectShape | None:
    """Retorna o ObjectShape registrado para a classe, se houver."""
    return _SHAPES_BY_TYPE.get(cls)


def dump_value(value: Any, keep: Callable[[Any], bool] | None = None) -> Any:
    """Converte valor de domínio em árvore JSON simples.

    Objetos registrados viram dicts (campos None omitidos), enums viram seu
    valor, listas e dicts são percorridos. Valores para os quais `keep`
    retorna True são preservados como folhas (ex: InputFile).

    Raises:
        TypeError: Se o valor não é serializável
    """
    if keep is not None and keep(value):
        return value
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [dump_value(item, keep) for item in value]
    if isinstance(value, dict):
        return {str(k): dump_value(v, keep) for k, v in value.items() if v is not None}
    shape = shape_of(type(value))
    if shape is None:
        raise TypeError(f"Tipo sem shape registrado: {type(value).__name__}")
    out: dict[str, Any] = {}
    for spec in shape.fields:
        item = getattr(value, spec.attribute)
        if item is None:
            continue
        out[spec.key] = dump_value(item, keep)
    return out

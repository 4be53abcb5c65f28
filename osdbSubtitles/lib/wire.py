# -*- coding: utf-8 -*-
# Protocol-neutral value tree shared by the encoder, the codec and the mapper.

import attrs

from .errors import TypeCoercionError

STRING = 'string'
INT = 'int'
DOUBLE = 'double'
BOOLEAN = 'boolean'
BASE64 = 'base64'
DATETIME = 'dateTime'
NIL = 'nil'

SCALAR_KINDS = (STRING, INT, DOUBLE, BOOLEAN, BASE64, DATETIME, NIL)


@attrs.frozen
class Scalar:
    kind: str = attrs.field(validator=attrs.validators.in_(SCALAR_KINDS))
    value: object = None

    @classmethod
    def of(cls, value):
        # bool first, it is an int subclass
        if value is None:
            return cls(NIL, None)
        if isinstance(value, bool):
            return cls(BOOLEAN, value)
        if isinstance(value, int):
            return cls(INT, value)
        if isinstance(value, float):
            return cls(DOUBLE, value)
        if isinstance(value, (bytes, bytearray)):
            return cls(BASE64, bytes(value))
        return cls(STRING, str(value))

    def __str__(self):
        if self.kind == BOOLEAN:
            return '1' if self.value else '0'
        if self.kind == NIL:
            return ''
        return str(self.value)


@attrs.frozen
class Array:
    values: tuple = attrs.field(default=(), converter=tuple)

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)


def _unique_members(members):
    members = tuple(members)
    seen = set()
    for name, _ in members:
        if name in seen:
            raise ValueError(f"duplicate struct member '{name}'")
        seen.add(name)
    return members


@attrs.frozen
class Struct:
    members: tuple = attrs.field(default=(), converter=_unique_members)

    def __iter__(self):
        return iter(self.members)

    def __len__(self):
        return len(self.members)

    def names(self):
        return [name for name, _ in self.members]

    def get(self, name, default=None):
        for member_name, value in self.members:
            if member_name == name:
                return value
        return default


@attrs.frozen
class MethodCall:
    method_name: str
    params: tuple = attrs.field(default=(), converter=tuple)


def struct(*members):
    """Builds a Struct from (name, value) pairs, wrapping plain python values."""
    return Struct(tuple((name, value if is_value(value) else Scalar.of(value)) for name, value in members))


def array(values):
    return Array(tuple(value if is_value(value) else Scalar.of(value) for value in values))


def is_value(value):
    return isinstance(value, (Scalar, Array, Struct))


def kind_of(value):
    if isinstance(value, Scalar):
        return f"scalar:{value.kind}"
    if isinstance(value, Array):
        return 'array'
    if isinstance(value, Struct):
        return 'struct'
    return type(value).__name__


def expect_scalar(value, where):
    if not isinstance(value, Scalar):
        raise TypeCoercionError(where, 'scalar', kind_of(value))
    return value


def expect_array(value, where):
    if not isinstance(value, Array):
        raise TypeCoercionError(where, 'array', kind_of(value))
    return value


def expect_struct(value, where):
    if not isinstance(value, Struct):
        raise TypeCoercionError(where, 'struct', kind_of(value))
    return value

import enum

from typing import Any, Dict, List

from .exceptions import ValueKindError


@enum.unique
class ValueKind(enum.Enum):
    STRING = enum.auto()
    NUMBER = enum.auto()
    BOOLEAN = enum.auto()
    ARRAY = enum.auto()
    OBJECT = enum.auto()


_PAYLOAD_TYPES = {
    ValueKind.STRING: str,
    ValueKind.NUMBER: float,
    ValueKind.BOOLEAN: bool,
    ValueKind.ARRAY: list,
    ValueKind.OBJECT: dict,
}


class Value:
    """A single parsed datum.

    Every value has a ``kind`` (one of ``ValueKind``) and the matching python payload in ``data``:

    - STRING:  ``str``, copied verbatim from between the quotes
    - NUMBER:  ``float``
    - BOOLEAN: ``bool``
    - ARRAY:   ``list`` of ``Value``, in source order
    - OBJECT:  ``dict`` of ``str`` to ``Value``

    Values compare equal only when both kind and payload are equal.
    """

    __slots__ = ('kind', 'data')

    kind: ValueKind

    def __init__(self, kind: ValueKind, data: Any) -> None:
        if not isinstance(kind, ValueKind):
            raise TypeError("Expected a ValueKind, got %r" % (kind,))
        expected_type = _PAYLOAD_TYPES[kind]
        # bool is an int, but never a NUMBER payload
        if not isinstance(data, expected_type) or (kind is ValueKind.NUMBER and isinstance(data, bool)):
            raise TypeError("%s value requires a %s payload, got %r" % (kind.name, expected_type.__name__, data))
        if kind is ValueKind.ARRAY:
            for item in data:
                if not isinstance(item, Value):
                    raise TypeError("Array items must be Values, got %r" % (item,))
        elif kind is ValueKind.OBJECT:
            for k, v in data.items():
                if not isinstance(k, str):
                    raise TypeError("Object keys must be strings, got %r" % (k,))
                if not isinstance(v, Value):
                    raise TypeError("Object values must be Values, got %r" % (v,))
        self.kind = kind
        self.data = data

    @classmethod
    def string(cls, s: str) -> 'Value':
        return cls(ValueKind.STRING, s)

    @classmethod
    def number(cls, x: float) -> 'Value':
        if isinstance(x, int) and not isinstance(x, bool):
            x = float(x)
        return cls(ValueKind.NUMBER, x)

    @classmethod
    def boolean(cls, b: bool) -> 'Value':
        return cls(ValueKind.BOOLEAN, b)

    @classmethod
    def array(cls, items: 'List[Value]') -> 'Value':
        return cls(ValueKind.ARRAY, list(items))

    @classmethod
    def object(cls, mapping: 'Dict[str, Value]') -> 'Value':
        return cls(ValueKind.OBJECT, dict(mapping))

    @classmethod
    def from_python(cls, obj: Any) -> 'Value':
        """Builds a Value out of plain python data (str, int, float, bool, list, tuple, dict)."""
        if isinstance(obj, Value):
            return obj
        if isinstance(obj, str):
            return cls.string(obj)
        if isinstance(obj, bool):
            return cls.boolean(obj)
        if isinstance(obj, (int, float)):
            return cls.number(obj)
        if isinstance(obj, (list, tuple)):
            return cls.array([cls.from_python(x) for x in obj])
        if isinstance(obj, dict):
            return cls.object({str(k): cls.from_python(v) for k, v in obj.items()})
        raise TypeError("Cannot convert %r to an FPL value" % (obj,))

    @property
    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    @property
    def is_number(self) -> bool:
        return self.kind is ValueKind.NUMBER

    @property
    def is_boolean(self) -> bool:
        return self.kind is ValueKind.BOOLEAN

    @property
    def is_array(self) -> bool:
        return self.kind is ValueKind.ARRAY

    @property
    def is_object(self) -> bool:
        return self.kind is ValueKind.OBJECT

    def _expect(self, kind):
        if self.kind is not kind:
            raise ValueKindError("Expected a %s value, got %s" % (kind.name, self.kind.name))
        return self.data

    def as_string(self) -> str:
        return self._expect(ValueKind.STRING)

    def as_number(self) -> float:
        return self._expect(ValueKind.NUMBER)

    def as_boolean(self) -> bool:
        return self._expect(ValueKind.BOOLEAN)

    def as_array(self) -> 'List[Value]':
        return self._expect(ValueKind.ARRAY)

    def as_object(self) -> 'Dict[str, Value]':
        return self._expect(ValueKind.OBJECT)

    def to_python(self) -> Any:
        "Recursively unwraps the value into plain python data"
        if self.kind is ValueKind.ARRAY:
            return [v.to_python() for v in self.data]
        if self.kind is ValueKind.OBJECT:
            return {k: v.to_python() for k, v in self.data.items()}
        return self.data

    def _pretty(self, level, indent_str):
        if self.kind is ValueKind.ARRAY:
            l = [indent_str*level, 'array', '\n']
            for v in self.data:
                l += v._pretty(level+1, indent_str)
            return l
        if self.kind is ValueKind.OBJECT:
            l = [indent_str*level, 'object', '\n']
            for k, v in self.data.items():
                l += [indent_str*(level+1), k, ':', '\n']
                l += v._pretty(level+2, indent_str)
            return l
        return [indent_str*level, self.kind.name.lower(), '\t', '%r' % (self.data,), '\n']

    def pretty(self, indent_str: str='  ') -> str:
        """Returns an indented string representation of the value.

        Great for debugging.
        """
        return ''.join(self._pretty(0, indent_str))

    def __eq__(self, other):
        try:
            return self.kind is other.kind and self.data == other.data
        except AttributeError:
            return False

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return 'Value(%s, %r)' % (self.kind.name, self.data)


class Block(dict):
    "The properties of one ``@name { ... }`` block, mapping each key to its Value"

    def to_python(self) -> Dict[str, Any]:
        return {k: v.to_python() for k, v in self.items()}

    def __repr__(self):
        return 'Block(%s)' % dict.__repr__(self)


class Document(dict):
    """The result of a parse: a mapping from block name to ``Block``.

    A Document is only ever handed out fully built. Declaring a block name twice keeps
    the later block only.
    """

    def to_python(self) -> Dict[str, Dict[str, Any]]:
        return {name: block.to_python() for name, block in self.items()}

    def pretty(self, indent_str: str='  ') -> str:
        l = []
        for name, block in self.items():
            l += ['@', name, '\n']
            for k, v in block.items():
                l += [indent_str, k, ':', '\n']
                l += v._pretty(2, indent_str)
        return ''.join(l)

    def __repr__(self):
        return 'Document(%s)' % dict.__repr__(self)

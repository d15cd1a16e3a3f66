"""
Circuit variables and linear combinations.

A LinearCombination is a sparse map from Variable to coefficient, kept
reduced mod FIELD_PRIME with like terms merged. Linear combinations are free
in this circuit model: only multiplication gates cost anything.
"""

from enum import Enum
from typing import Callable, Dict, Iterator, NamedTuple, Optional, Tuple, Union

from zkposeidon.crypto.field import FIELD_PRIME


class VariableKind(Enum):
    ONE = 0
    COMMITTED = 1
    MULTIPLIER_LEFT = 2
    MULTIPLIER_RIGHT = 3
    MULTIPLIER_OUTPUT = 4


class Variable(NamedTuple):
    """A wire in the constraint system."""
    kind: VariableKind
    index: int

    @classmethod
    def one(cls) -> "Variable":
        """The constant-one wire."""
        return cls(VariableKind.ONE, 0)

    def to_lc(self) -> "LinearCombination":
        return LinearCombination({self: 1})

    # Arithmetic lifts a variable into a linear combination
    def __add__(self, other):
        return self.to_lc() + other

    def __radd__(self, other):
        return self.to_lc() + other

    def __sub__(self, other):
        return self.to_lc() - other

    def __rsub__(self, other):
        return LinearCombination.of(other) - self.to_lc()

    def __mul__(self, scalar: int) -> "LinearCombination":
        return self.to_lc() * scalar

    __rmul__ = __mul__

    def __neg__(self) -> "LinearCombination":
        return -self.to_lc()


Operand = Union["LinearCombination", Variable, int]


class LinearCombination:
    """Sparse linear combination of variables over the scalar field."""

    __slots__ = ("_terms",)

    def __init__(self, terms: Optional[Dict[Variable, int]] = None):
        self._terms: Dict[Variable, int] = {}
        if terms:
            for var, coeff in terms.items():
                coeff %= FIELD_PRIME
                if coeff:
                    self._terms[var] = coeff

    @classmethod
    def of(cls, value: Operand) -> "LinearCombination":
        """Lift a variable, constant or linear combination."""
        if isinstance(value, LinearCombination):
            return value
        if isinstance(value, Variable):
            return value.to_lc()
        if isinstance(value, int):
            return cls({Variable.one(): value})
        raise TypeError(f"Cannot build a linear combination from {type(value).__name__}")

    @property
    def terms(self) -> Dict[Variable, int]:
        return dict(self._terms)

    def items(self) -> Iterator[Tuple[Variable, int]]:
        return iter(self._terms.items())

    def constant(self) -> int:
        """Coefficient of the constant-one wire."""
        return self._terms.get(Variable.one(), 0)

    def __len__(self) -> int:
        return len(self._terms)

    def __add__(self, other: Operand) -> "LinearCombination":
        other = LinearCombination.of(other)
        terms = dict(self._terms)
        for var, coeff in other._terms.items():
            terms[var] = terms.get(var, 0) + coeff
        return LinearCombination(terms)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> "LinearCombination":
        return self + (-LinearCombination.of(other))

    def __rsub__(self, other: Operand) -> "LinearCombination":
        return LinearCombination.of(other) - self

    def __neg__(self) -> "LinearCombination":
        return LinearCombination({var: -coeff for var, coeff in self._terms.items()})

    def __mul__(self, scalar: int) -> "LinearCombination":
        if not isinstance(scalar, int):
            return NotImplemented
        return LinearCombination({var: coeff * scalar for var, coeff in self._terms.items()})

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if isinstance(other, (Variable, int)):
            other = LinearCombination.of(other)
        if not isinstance(other, LinearCombination):
            return NotImplemented
        return self._terms == other._terms

    __hash__ = None

    def evaluate(self, lookup: Callable[[Variable], Optional[int]]) -> Optional[int]:
        """
        Evaluate under an assignment.

        Returns None as soon as any constituent variable has no known value.
        """
        acc = 0
        for var, coeff in self._terms.items():
            value = lookup(var)
            if value is None:
                return None
            acc += coeff * value
        return acc % FIELD_PRIME

    def to_bytes(self) -> bytes:
        """Deterministic encoding used for topology digests."""
        out = bytearray()
        for var, coeff in sorted(self._terms.items(), key=lambda t: (t[0].kind.value, t[0].index)):
            out += var.kind.value.to_bytes(1, "big")
            out += var.index.to_bytes(8, "big")
            out += coeff.to_bytes(32, "big")
        return bytes(out)

    def __repr__(self) -> str:
        parts = [f"{coeff}*{var.kind.name}[{var.index}]" for var, coeff in self._terms.items()]
        return f"LinearCombination({' + '.join(parts) or '0'})"


def weighted_sum(pairs) -> LinearCombination:
    """
    Compute sum(lc * weight) over (lc, weight) pairs in one pass.

    Equivalent to folding with + and *, without the intermediate copies.
    """
    terms: Dict[Variable, int] = {}
    for lc, weight in pairs:
        for var, coeff in LinearCombination.of(lc).items():
            terms[var] = terms.get(var, 0) + coeff * weight
    return LinearCombination(terms)

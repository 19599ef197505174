"""
Linear combination formatting.

Turns ``sum(coeff_i * var_i)`` with exact coefficients into a compact
source expression. When all terms share one absolute coefficient it is
factored out and applied once, so ``3*a - 3*b`` is emitted as
``3*(a-b)`` and ``a/2 - b/2`` as ``(a-b)/2``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..numerics.rational import Rational, RationalLike, as_rational
from ..splines.catalog import SplineType


def format_rational_literal(value: Rational) -> str:
    """Format a non-negative rational as a float literal (``3`` or ``(1/6f)``)."""
    if value.is_integer:
        return f"{value.n}"
    return f"({value}f)"


@dataclass
class LinearCombination:
    """
    Ordered terms of a linear combination.

    Terms keep their insertion order, which is the column order of the
    matrix row they came from.
    """

    terms: List[Tuple[Rational, str]] = field(default_factory=list)

    @classmethod
    def from_row(cls, row: Sequence[RationalLike], variables: Sequence[str]) -> LinearCombination:
        combination = cls()
        for coeff, var in zip(row, variables):
            combination.add_term(coeff, var)
        return combination

    def add_term(self, coeff: RationalLike, var: str) -> LinearCombination:
        coeff = as_rational(coeff)
        if coeff != 0:
            self.terms.append((coeff, var))
        return self

    def factored(self) -> Tuple[Rational, List[Tuple[Rational, str]]]:
        """
        Split off a global scale.

        Returns:
            ``(scale, terms)`` where every term coefficient is divided by
            the scale. The scale is 1 unless there are at least two terms
            and all of them share the same absolute coefficient.
        """
        if len(self.terms) < 2:
            return Rational.ONE, list(self.terms)
        common = abs(self.terms[0][0])
        if any(abs(coeff) != common for coeff, _ in self.terms):
            return Rational.ONE, list(self.terms)
        return common, [(coeff / common, var) for coeff, var in self.terms]

    def format(self) -> str:
        if not self.terms:
            return "0"

        scale, terms = self.factored()
        line = "".join(_format_term(i, coeff, var) for i, (coeff, var) in enumerate(terms))

        if scale != 1:
            if scale.n == 1:
                line = f"({line})/{scale.d}"
            else:
                line = f"{format_rational_literal(scale)}*({line})"
        return line

    def __str__(self) -> str:
        return self.format()

    def __len__(self) -> int:
        return len(self.terms)


def _format_term(index: int, coeff: Rational, var: str) -> str:
    if coeff == 1:
        return f"+{var}" if index > 0 else var
    if coeff == -1:
        return f"-{var}"
    if coeff > 0:
        sign = "+" if index > 0 else ""
        return f"{sign}{format_rational_literal(coeff)}*{var}"
    return f"-{format_rational_literal(-coeff)}*{var}"


def coefficient_expressions(spline: SplineType, prefix: str = "") -> List[LinearCombination]:
    """
    Build one linear combination per monomial coefficient.

    Row ``i`` of the characteristic matrix, taken against the upper-cased
    point names, is the coefficient of ``t^i``. The expressions do not
    depend on the geometric dimension: vector points are combined
    component-wise by the host vector types.

    Args:
        spline: The spline type
        prefix: Optional prefix for the point variables (e.g. ``"s."``)
    """
    names = [f"{prefix}{name}" for name in spline.field_names]
    return [
        LinearCombination.from_row(spline.char_matrix.row(i), names)
        for i in range(spline.point_count)
    ]

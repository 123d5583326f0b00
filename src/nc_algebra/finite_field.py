"""
Extensions of prime fields

This module realizes the finite field `GF(p^n)` as the quotient of the
polynomials in one variable over `GF(p)` modulo an irreducible polynomial of
degree `n`. Polynomials are represented as elements of the free algebra
``NCAlgebra(GF(p), 'x')`` and residues are computed with
:func:`~nc_algebra.division.divide`.

Elements are numbered by integers: the base-`p` digits of `i` are the
coefficients of the residue, starting with the constant term.

EXAMPLES::

    sage: from nc_algebra.finite_field import PrimeFieldExtension
    sage: F = PrimeFieldExtension(2, 2); F
    Finite field of size 2^2 with modulus x^2 + x + 1
    sage: list(F)
    [0, 1, 2, 3]
    sage: [[a + b for b in F] for a in F]
    [[0, 1, 2, 3], [1, 0, 3, 2], [2, 3, 0, 1], [3, 2, 1, 0]]
    sage: F(2)*F(2), F(2)*F(3), F(3)*F(3)
    (3, 1, 2)
    sage: [int(F(i)) for i in range(4)]
    [0, 1, 2, 3]

The freshman's dream in `GF(101^2)`::

    sage: F = PrimeFieldExtension(101, 2)
    sage: x, y = F(6158), F(8033)
    sage: (x + y)^101 == x^101 + y^101
    True
    sage: (x + y)^101
    6414
"""

#############################################################################
#  Copyright (C) 2024, 2025                                                 #
#                The nc_algebra developers                                  #
#                                                                           #
#  Distributed under the terms of the GNU General Public License (GPL)      #
#  either version 2, or (at your option) any later version                  #
#                                                                           #
#  http://www.gnu.org/licenses/                                             #
#############################################################################

from sage.arith.misc import is_prime
from sage.categories.fields import Fields
from sage.misc.cachefunc import cached_function, cached_method
from sage.rings.finite_rings.finite_field_constructor import GF
from sage.rings.integer import Integer
from sage.rings.polynomial.polynomial_ring_constructor import PolynomialRing
from sage.structure.element import FieldElement
from sage.structure.parent import Parent
from sage.structure.richcmp import richcmp
from sage.structure.unique_representation import UniqueRepresentation

from .division import divide
from .nc_algebra import NCAlgebra
from .nc_polynomial import NCPolynomial

@cached_function
def irreducible_polynomial(p, n):
    r"""
    Return the first monic irreducible polynomial of degree `n` over `GF(p)`.

    The candidates `x^n + c_{n-1} x^{n-1} + \dots + c_0` are enumerated by
    the integer with base-`p` digits `c_0, \dots, c_{n-1}`. If the field
    `GF(p^n)` has fewer than 1024 elements, the polynomial is moreover
    required to be primitive.

    OUTPUT:

    An element of ``NCAlgebra(GF(p), 'x')``.

    EXAMPLES::

        sage: from nc_algebra.finite_field import irreducible_polynomial
        sage: irreducible_polynomial(2, 2)
        x^2 + x + 1
        sage: irreducible_polynomial(3, 3)
        x^3 + 2*x + 1
        sage: irreducible_polynomial(101, 2)
        x^2 + 2
        sage: irreducible_polynomial(4, 2)
        Traceback (most recent call last):
        ...
        ValueError: 4 is not a prime
    """
    p, n = Integer(p), Integer(n)
    if not is_prime(p):
        raise ValueError("%s is not a prime" % p)
    if n < 1:
        raise ValueError("the degree must be positive")
    K = GF(p)
    R = PolynomialRing(K, "x")
    A = NCAlgebra(K, "x")
    q = p**n
    for i in range(1, q):
        coeffs = Integer(i).digits(p, padto=n) + [1]
        u = R(coeffs)
        if not u.is_irreducible():
            continue
        if q < 1024 and not u.is_primitive():
            continue
        return A.from_terms([(c, (0,)*k) for k, c in enumerate(coeffs)])
    raise ValueError("no irreducible polynomial of degree %s over GF(%s)" % (n, p))

class PrimeFieldExtensionElement(FieldElement):
    r"""
    An element of a :class:`PrimeFieldExtension`, represented by its residue
    modulo the defining polynomial.
    """

    def __init__(self, parent, poly):
        FieldElement.__init__(self, parent)
        self._poly = poly

    def polynomial(self):
        return self._poly

    def _add_(self, other):
        return self.parent()._from_polynomial(self._poly + other._poly)

    def _sub_(self, other):
        return self.parent()._from_polynomial(self._poly - other._poly)

    def _neg_(self):
        return self.__class__(self.parent(), -self._poly)

    def _mul_(self, other):
        return self.parent()._from_polynomial(self._poly*other._poly)

    def __invert__(self):
        if not self._poly:
            raise ZeroDivisionError("inverse of zero")
        return self**(self.parent().order() - 2)

    def _div_(self, other):
        return self._mul_(~other)

    def __bool__(self):
        return bool(self._poly)

    def __int__(self):
        p = self.parent().characteristic()
        return int(sum(int(c)*p**len(w) for c, w in self._poly.terms()))

    def _integer_(self, ZZ=None):
        return Integer(int(self))

    def _richcmp_(self, other, op):
        return richcmp(int(self), int(other), op)

    def __hash__(self):
        return hash(int(self))

    def _repr_(self):
        return str(int(self))

class PrimeFieldExtension(UniqueRepresentation, Parent):
    r"""
    The finite field with `p^n` elements.

    EXAMPLES::

        sage: from nc_algebra.finite_field import PrimeFieldExtension
        sage: F = PrimeFieldExtension(3, 2)
        sage: F.order(), F.characteristic(), F.degree()
        (9, 3, 2)
        sage: F.modulus()
        x^2 + x + 2
        sage: all(a*~a == F.one() for a in F if a)
        True
        sage: F(5)/F(5)
        1
        sage: ~F.zero()
        Traceback (most recent call last):
        ...
        ZeroDivisionError: inverse of zero

    Extension fields can serve as coefficient fields of free algebras::

        sage: from nc_algebra import NCAlgebra
        sage: A.<u,v> = NCAlgebra(PrimeFieldExtension(2, 2))
        sage: F = A.base_ring()
        sage: p = A.from_terms([(F(2), (1, 0)), (F(3), (0,))])
        sage: p
        2*v*u + 3*u
        sage: p.monic()
        v*u + 2*u
    """

    Element = PrimeFieldExtensionElement

    def __init__(self, p, n):
        self._modulus = irreducible_polynomial(p, n)
        self._algebra = self._modulus.parent()
        self._p = Integer(p)
        self._n = Integer(n)
        Parent.__init__(self, base=self._algebra.base_ring(), category=Fields())

    def _repr_(self):
        return "Finite field of size %s^%s with modulus %s" % (self._p, self._n, self._modulus)

    def modulus(self):
        return self._modulus

    def characteristic(self):
        return self._p

    def degree(self):
        return self._n

    def order(self):
        return self._p**self._n

    cardinality = order

    def is_field(self, proof=True):
        return True

    def is_finite(self):
        return True

    def is_exact(self):
        return True

    @cached_method
    def zero(self):
        return self.element_class(self, self._algebra.zero())

    @cached_method
    def one(self):
        return self.element_class(self, self._algebra.one())

    def _from_polynomial(self, poly):
        return self.element_class(self, divide(poly, [self._modulus]))

    def _element_constructor_(self, x):
        r"""
        Convert `x` into this field. Integers are interpreted as element
        numbers, polynomials in one variable over the prime field are
        reduced modulo the defining polynomial.
        """
        if isinstance(x, NCPolynomial):
            return self._from_polynomial(self._algebra(x))
        i = Integer(x) % self.order()
        return self.element_class(self, self._algebra.from_terms(
            [(c, (0,)*k) for k, c in enumerate(i.digits(self._p))]))

    def element(self, i):
        r"""
        Return the element with number `i`.
        """
        return self._element_constructor_(Integer(i))

    def __iter__(self):
        for i in range(self.order()):
            yield self.element(i)

    def _an_element_(self):
        return self.element(self._p if self._n > 1 else 1)

"""
Free noncommutative algebras

This module provides the constructor ``NCAlgebra`` for free associative
algebras `K\langle x_0, \dots, x_{n-1}\rangle` over a field `K`, equipped
with a monomial order. Elements are instances of
:class:`~nc_algebra.nc_polynomial.NCPolynomial`.

EXAMPLES::

    sage: from nc_algebra import NCAlgebra
    sage: A.<a,b> = NCAlgebra(QQ); A
    Free algebra in a, b over Rational Field with deglex order
    sage: A.gens()
    (a, b)
    sage: A("a*b*a - b")
    a*b*a - b
    sage: B = NCAlgebra(QQ, 'a,b', order='elim'); B
    Free algebra in a, b over Rational Field with elim order
    sage: B is NCAlgebra(QQ, ['a', 'b'], order='elim')
    True
    sage: A is B
    False
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

from sage.categories.algebras import Algebras
from sage.misc.cachefunc import cached_method
from sage.misc.sage_eval import sage_eval
from sage.structure.parent import Parent
from sage.structure.unique_representation import UniqueRepresentation

from .monomial import MAX_GENERATORS, monomial_order
from .nc_polynomial import NCPolynomial

def NCAlgebra(base_ring, names=None, order="deglex"):
    r"""
    Create the free algebra over ``base_ring`` with the given generators.

    INPUT:

    - ``base_ring`` -- a field
    - ``names`` -- the names of the generators, either as a comma separated
      string or as a list of strings. The `i`-th generator is smaller than
      the `(i+1)`-st in the monomial order.
    - ``order`` (default: ``'deglex'``) -- the monomial order, either
      ``'deglex'`` or ``'elim'``, see :mod:`~nc_algebra.monomial`

    OUTPUT:

    The unique free algebra with these parameters.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: NCAlgebra(GF(7), 'x,y,z')
        Free algebra in x, y, z over Finite Field of size 7 with deglex order
        sage: NCAlgebra(ZZ, 'x')
        Traceback (most recent call last):
        ...
        TypeError: the base ring must be a field
        sage: NCAlgebra(QQ, 'x,x')
        Traceback (most recent call last):
        ...
        ValueError: generator names must be distinct
        sage: NCAlgebra(QQ, ['x%s' % i for i in range(300)])
        Traceback (most recent call last):
        ...
        ValueError: at most 256 generators are supported
    """
    if names is None:
        raise ValueError("the names of the generators must be specified")
    if isinstance(names, str):
        names = names.split(",")
    names = tuple(str(n).strip() for n in names)
    if not names or not all(names):
        raise ValueError("generator names must be nonempty")
    if len(set(names)) != len(names):
        raise ValueError("generator names must be distinct")
    if len(names) > MAX_GENERATORS:
        raise ValueError("at most %s generators are supported" % MAX_GENERATORS)
    if not is_suitable_base_ring(base_ring):
        raise TypeError("the base ring must be a field")
    return NCAlgebra_generic(base_ring, names, monomial_order(order))

def is_suitable_base_ring(R):
    r"""
    Checks whether `R` is a field, i.e., whether it provides the arithmetic
    required for coefficients of noncommutative polynomials.
    """
    try:
        return R.is_field()
    except (AttributeError, NotImplementedError):
        return False

def is_NCAlgebra(A):
    r"""
    Checks whether `A` is a free algebra created by ``NCAlgebra``.
    """
    return isinstance(A, NCAlgebra_generic)

class NCAlgebra_generic(UniqueRepresentation, Parent):
    r"""
    Free associative algebra over a field with a monomial order.
    """

    Element = NCPolynomial

    def __init__(self, base_ring, names, order):
        Parent.__init__(self, base=base_ring, names=names, category=Algebras(base_ring))
        self._names = names
        self._order = order

    # information extraction

    def order(self):
        r"""
        Return the monomial order of this algebra.
        """
        return self._order

    def ngens(self):
        return len(self._names)

    def variable_names(self):
        return self._names

    def gen(self, n=0):
        r"""
        Return the `n`-th generator of this algebra.
        """
        if n < 0 or n >= self.ngens():
            raise IndexError("No such generator.")
        return self.gens()[n]

    @cached_method
    def gens(self):
        r"""
        Return the tuple of generators of this algebra.
        """
        one = self.base_ring().one()
        return tuple(self._from_dict({(i,): one}) for i in range(self.ngens()))

    def _first_ngens(self, n):
        return self.gens()[:n]

    def gens_dict(self):
        r"""
        Returns a dictionary whose keys are the variable names of this
        algebra as strings and whose values are the corresponding generators.
        """
        return dict(zip(self._names, self.gens()))

    def is_commutative(self):
        return self.ngens() <= 1

    def is_field(self, proof=True):
        return False

    def is_exact(self):
        return self.base_ring().is_exact()

    def characteristic(self):
        return self.base_ring().characteristic()

    def _repr_(self):
        return "Free algebra in %s over %s with %s" % (", ".join(self._names), self.base_ring(), self._order)

    def _latex_(self):
        from sage.misc.latex import latex
        return "%s\\langle %s\\rangle" % (latex(self.base_ring()), ", ".join(self.latex_variable_names()))

    # generation of elements

    @cached_method
    def zero(self):
        return self._from_dict({})

    @cached_method
    def one(self):
        return self._from_dict({(): self.base_ring().one()})

    def _from_dict(self, terms):
        return self.element_class(self, terms)

    def monomial(self, w):
        r"""
        Return the monomial `w`, given as a sequence of generator indices.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<x,y> = NCAlgebra(QQ)
            sage: A.monomial([0, 1, 1])
            x*y^2
        """
        return self.term(self.base_ring().one(), w)

    def term(self, c, w):
        r"""
        Return `c` times the monomial `w`.
        """
        return self.from_terms([(c, w)])

    def from_terms(self, terms):
        r"""
        Return the polynomial with the given terms, a list of pairs
        (coefficient, monomial). Terms with the same monomial are added up
        and zero coefficients are dropped.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<x,y> = NCAlgebra(QQ)
            sage: A.from_terms([(2, (0,)), (3, (1, 0)), (-2, (0,)), (0, (1,))])
            3*y*x
            sage: A.from_terms([(1, (2,))])
            Traceback (most recent call last):
            ...
            ValueError: invalid monomial (2,)
        """
        K = self.base_ring()
        n = self.ngens()
        p = self._from_dict({})
        for c, w in terms:
            w = tuple(int(s) for s in w)
            if any(s < 0 or s >= n for s in w):
                raise ValueError("invalid monomial %s" % (w,))
            p._add_term(1, K(c), w)
        return p

    def _element_constructor_(self, x):
        r"""
        Create a new element from the given data.

        The argument can be an element of a free algebra whose base ring can
        be converted into the base ring of ``self`` and whose generator names
        are among the generator names of ``self``, a dictionary mapping
        monomials to coefficients, a list of (coefficient, monomial) pairs, a
        string, or anything which can be converted into the base ring.
        """
        if isinstance(x, NCPolynomial):
            P = x.parent()
            if P is self:
                return x
            try:
                index = [self._names.index(name) for name in P.variable_names()]
            except ValueError:
                raise TypeError("cannot convert %s into %s" % (x, self))
            return self.from_terms([(c, tuple(index[s] for s in w)) for w, c in x._terms.items()])
        if isinstance(x, dict):
            return self.from_terms([(c, w) for w, c in x.items()])
        if isinstance(x, (list, tuple)):
            return self.from_terms(x)
        if isinstance(x, str):
            return self(sage_eval(x, locals=self.gens_dict()))
        return self.term(x, ())

    def _coerce_map_from_(self, P):
        r"""
        There is a coercion from `P` into ``self`` if `P` coerces into the
        base ring, or if `P` is a free algebra with the same monomial order
        whose generators are among those of ``self`` (in the same relative
        order) and whose base ring coerces into the base ring of ``self``.
        """
        if is_NCAlgebra(P):
            if P.order() != self.order():
                return False
            names = P.variable_names()
            if not all(name in self._names for name in names):
                return False
            index = [self._names.index(name) for name in names]
            if index != sorted(index):
                return False
            return self.base_ring().has_coerce_map_from(P.base_ring())
        return self.base_ring().has_coerce_map_from(P)

    def _an_element_(self):
        return self.gen(0)

    def some_elements(self):
        return list(self.gens()) + [self.one(), self.zero()]

    # generation of related objects

    def change_ring(self, R):
        r"""
        Return the free algebra with the same generators and order over `R`.
        """
        return NCAlgebra(R, self._names, self._order)

    def ideal(self, gens, coerce=True):
        r"""
        Creates the two-sided ideal generated by the given generators.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<y,x> = NCAlgebra(QQ)
            sage: I = A.ideal([x^2 - 1, x - y]); I
            Twosided Ideal (x^2 - 1, x - y) of Free algebra in y, x over Rational Field with deglex order
            sage: I.groebner_basis()
            [x - y, y^2 - 1]
        """
        from .ideal import NCTwoSidedIdeal
        return NCTwoSidedIdeal(self, gens, coerce)

"""
Noncommutative polynomials
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

from sage.misc.repr import coeff_repr
from sage.structure.element import AlgebraElement
from sage.structure.richcmp import richcmp, op_EQ, op_NE

from .monomial import monomial_repr

class NCPolynomial(AlgebraElement):
    r"""
    An element of a free noncommutative algebra over a field.

    The polynomial is stored as a dictionary which maps monomials (tuples of
    generator indices) to nonzero coefficients. The leading monomial with
    respect to the order of the parent is cached.

    Polynomials are immutable. The methods ``_add_term`` and
    ``_add_multiple`` modify ``self`` in place and must only be applied to
    fresh copies which are not visible to the user.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: A.<a,b> = NCAlgebra(QQ)
        sage: p = a*b*a - b; p
        a*b*a - b
        sage: p.terms()
        [(1, (0, 1, 0)), (-1, (1,))]
        sage: (a + b)^2
        b^2 + b*a + a*b + a^2
        sage: b*a == a*b
        False
        sage: 2*b - b*2
        0
    """

    def __init__(self, parent, terms=None):
        AlgebraElement.__init__(self, parent)
        self._key = parent.order().key
        self._terms = {} if terms is None else terms
        self._lm = None

    def _new(self, terms=None):
        return self.__class__(self.parent(), terms)

    def _copy(self):
        p = self._new(dict(self._terms))
        p._lm = self._lm
        return p

    # in-place modifications of private working copies

    def _add_term(self, sign, c, w):
        r"""
        Add ``sign*c`` times the monomial `w` to ``self``, in place.
        """
        terms = self._terms
        old = terms.get(w)
        if old is None:
            new = c if sign > 0 else -c
        else:
            new = old + c if sign > 0 else old - c
        if new.is_zero():
            if old is not None:
                del terms[w]
                if self._lm == w:
                    self._lm = None
            return
        terms[w] = new
        if self._lm is not None and self._key(w) > self._key(self._lm):
            self._lm = w

    def _add_multiple(self, sign, c, left, x, right):
        r"""
        Add ``sign*c*left*x*right`` to ``self``, in place. Here `c` is a
        scalar, `left` and `right` are monomials and `x` is a polynomial
        distinct from ``self``.
        """
        for w, d in list(x._terms.items()):
            self._add_term(sign, c*d, left + w + right)

    # arithmetic

    def _add_(self, other):
        p = self._copy()
        for w, c in other._terms.items():
            p._add_term(1, c, w)
        return p

    def _sub_(self, other):
        p = self._copy()
        for w, c in other._terms.items():
            p._add_term(-1, c, w)
        return p

    def _neg_(self):
        p = self._new(dict((w, -c) for w, c in self._terms.items()))
        p._lm = self._lm
        return p

    def _mul_(self, other):
        p = self._new()
        for u, c in self._terms.items():
            for v, d in other._terms.items():
                p._add_term(1, c*d, u + v)
        return p

    def _lmul_(self, c):
        return self.mul_scalar(c)

    def _rmul_(self, c):
        return self.mul_scalar(c)

    def _div_(self, other):
        if not other.is_constant():
            raise ArithmeticError("division by a non-constant polynomial is not defined; use reduce() instead")
        return self.mul_scalar(~other.constant_coefficient())

    def _pow_int(self, n):
        n = int(n)
        if n < 0:
            raise ValueError("exponent must be a nonnegative integer")
        if n == 0:
            return self.parent().one()
        p = self
        for i in range(n - 1):
            p = p._mul_(self)
        return p

    def mul_scalar(self, c):
        r"""
        Return the product of ``self`` with the scalar `c`.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<x,y> = NCAlgebra(GF(5))
            sage: (x*y + 2*y).mul_scalar(3)
            3*x*y + y
            sage: (x*y + 2*y).mul_scalar(0)
            0
        """
        c = self.base_ring()(c)
        if c.is_zero():
            return self._new()
        p = self._new(dict((w, c*d) for w, d in self._terms.items()))
        p._lm = self._lm
        return p

    def monic(self):
        r"""
        Return ``self`` divided by its leading coefficient.
        """
        if not self._terms:
            return self
        return self.mul_scalar(~self.lc())

    # tests

    def __bool__(self):
        return bool(self._terms)

    def _richcmp_(self, other, op):
        if op == op_EQ or op == op_NE:
            return (self._terms == other._terms) == (op == op_EQ)
        return richcmp(self._cmp_key(), other._cmp_key(), op)

    def _cmp_key(self):
        r"""
        Sort key for polynomials: the monomials from the leading one down,
        compared in the monomial order, then the coefficients compared by
        their string representation.
        """
        terms = self.terms()
        return (tuple(self._key(w) for _, w in terms), tuple(str(c) for c, _ in terms))

    def __hash__(self):
        return hash(frozenset(self._terms.items()))

    def is_homogeneous(self):
        r"""
        Return whether all monomials of ``self`` have the same length.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<x,y,z> = NCAlgebra(QQ)
            sage: (x^2 - 2*y^2).is_homogeneous()
            True
            sage: (x^2 - y).is_homogeneous()
            False
            sage: A.zero().is_homogeneous()
            True
        """
        return len(set(len(w) for w in self._terms)) <= 1

    def is_monomial(self):
        r"""
        Return whether ``self`` is a single monomial with coefficient one.
        """
        if len(self._terms) != 1:
            return False
        return next(iter(self._terms.values())).is_one()

    def is_constant(self):
        return not self._terms or (len(self._terms) == 1 and () in self._terms)

    def is_monic(self):
        return bool(self._terms) and self.lc().is_one()

    # information extraction

    def leading_monomial(self):
        r"""
        Return the leading monomial of ``self`` as a tuple of generator indices.
        """
        if self._lm is None:
            if not self._terms:
                raise ValueError("the zero polynomial has no leading term")
            self._lm = max(self._terms, key=self._key)
        return self._lm

    def leading_term(self):
        r"""
        Return the leading term of ``self`` as a pair (coefficient, monomial).

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<x,y> = NCAlgebra(QQ)
            sage: (3*x*y + y^3 - 2).leading_term()
            (1, (1, 1, 1))
            sage: A.zero().leading_term()
            Traceback (most recent call last):
            ...
            ValueError: the zero polynomial has no leading term
        """
        w = self.leading_monomial()
        return self._terms[w], w

    def lc(self):
        r"""
        Return the leading coefficient of ``self``, or zero if ``self`` is zero.
        """
        if not self._terms:
            return self.base_ring().zero()
        return self._terms[self.leading_monomial()]

    def lm(self):
        r"""
        Return the leading monomial of ``self`` as an element of the parent.
        """
        if not self._terms:
            return self
        return self._new({self.leading_monomial(): self.base_ring().one()})

    def lt(self):
        r"""
        Return the leading term of ``self`` as an element of the parent.
        """
        if not self._terms:
            return self
        c, w = self.leading_term()
        return self._new({w: c})

    def terms(self):
        r"""
        Return the list of pairs (coefficient, monomial) of ``self``, sorted
        in descending order.
        """
        key = self._key
        return [(self._terms[w], w) for w in sorted(self._terms, key=key, reverse=True)]

    def monomials(self):
        return sorted(self._terms, key=self._key, reverse=True)

    def coefficients(self):
        return [c for c, _ in self.terms()]

    def dict(self):
        return dict(self._terms)

    def number_of_terms(self):
        return len(self._terms)

    __len__ = number_of_terms

    def degree(self):
        r"""
        Return the length of the longest monomial of ``self``, or `-1` if
        ``self`` is zero.
        """
        if not self._terms:
            return -1
        return max(len(w) for w in self._terms)

    def monomial_coefficient(self, w):
        return self._terms.get(tuple(w), self.base_ring().zero())

    def constant_coefficient(self):
        return self.monomial_coefficient(())

    def reduce(self, basis, cofactors=False, infolevel=0):
        r"""
        Reduce ``self`` with respect to ``basis``.

        INPUT:

        - ``basis`` -- a list of elements of the parent of ``self``, or an
          ideal, in which case its Groebner basis is used
        - ``cofactors`` -- if ``True``, also return the quotients recorded
          during the division, see :func:`~nc_algebra.division.divide`
        - ``infolevel`` -- verbosity of progress reports

        OUTPUT:

        The remainder of the division of ``self`` by the elements of
        ``basis``; each of them is used as soon as its leading monomial
        divides the current leading monomial (first fit, leftmost
        occurrence). The remainder is irreducible with respect to ``basis``.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<z,y,x> = NCAlgebra(QQ)
            sage: (z*x^2*y*x).reduce([x*y + x, x^2 + x*z])
            z*x*z*x
            sage: r, quo = (x*y).reduce([x*y + x], cofactors=True); r, quo
            (-x, [[Quotient(coefficient=1, left=(), right=())]])
        """
        from .division import divide
        from .ideal import NCTwoSidedIdeal
        if isinstance(basis, NCTwoSidedIdeal):
            basis = basis.groebner_basis()
        A = self.parent()
        basis = [A(g) for g in basis]
        return divide(self, basis, quotients=cofactors, infolevel=infolevel)

    # conversion

    def to_string(self, symbol_name=None):
        r"""
        Return a string representation of ``self``.

        INPUT:

        - ``symbol_name`` (optional) -- a function which maps a generator
          index to the name under which it is printed; by default, the
          variable names of the parent are used.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<x,y> = NCAlgebra(QQ)
            sage: p = x*y*y - 1/2*y + 1
            sage: p.to_string()
            'x*y^2 - 1/2*y + 1'
            sage: p.to_string(lambda s: "ab"[s])
            'a*b^2 - 1/2*b + 1'
        """
        if symbol_name is None:
            names = self.parent().variable_names()
            symbol_name = lambda s: names[s]
        return self._format(symbol_name, "*", "%s^%s", False)

    def _format(self, symbol_name, mult, power, is_latex):
        if not self._terms:
            return "0"
        out = []
        for c, w in self.terms():
            coeff = coeff_repr(c, is_latex)
            negative = coeff.startswith("-")
            if negative:
                coeff = coeff[1:]
            if not w:
                term = coeff
            elif coeff == "1":
                term = monomial_repr(w, symbol_name, mult, power)
            else:
                term = coeff + mult + monomial_repr(w, symbol_name, mult, power)
            if not out:
                out.append("-" + term if negative else term)
            else:
                out.append((" - " if negative else " + ") + term)
        return "".join(out)

    def _repr_(self):
        return self.to_string()

    def _latex_(self):
        names = self.parent().latex_variable_names()
        return self._format(lambda s: names[s], " ", "%s^{%s}", True)

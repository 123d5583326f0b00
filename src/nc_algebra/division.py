"""
Division of noncommutative polynomials

EXAMPLES::

    sage: from nc_algebra import NCAlgebra
    sage: from nc_algebra.division import divide, reconstruct
    sage: A.<z,y,x> = NCAlgebra(QQ)
    sage: f = z*x^2*y*x
    sage: basis = [x*y + x, x^2 + x*z]
    sage: r, quo = divide(f, basis, quotients=True)
    sage: r
    z*x*z*x
    sage: quo
    [[Quotient(coefficient=1, left=(0, 2), right=(2,))],
     [Quotient(coefficient=-1, left=(0,), right=(2,))]]
    sage: reconstruct(r, quo, basis) == f
    True

No monomial of the remainder contains the leading monomial of a divisor::

    sage: from nc_algebra.monomial import monomial_find
    sage: all(monomial_find(w, g.leading_monomial()) < 0 for w in r.monomials() for g in basis)
    True
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

import logging
from collections import namedtuple
from datetime import datetime

from sage.misc.lazy_string import lazy_string

from .monomial import monomial_find

logger = logging.getLogger(__name__)

Quotient = namedtuple("Quotient", ["coefficient", "left", "right"])

def divide(f, basis, hidden=None, quotients=False, infolevel=0):
    r"""
    Divide `f` by the polynomials in ``basis``.

    INPUT:

    - ``f`` -- a noncommutative polynomial
    - ``basis`` -- a list of polynomials with the same parent as `f`
    - ``hidden`` (optional) -- a collection of indices of ``basis`` whose
      elements are ignored; zero elements of ``basis`` are ignored as well
    - ``quotients`` (default: ``False``) -- whether to return the quotients
    - ``infolevel`` (default: 0) -- verbosity of progress reports

    OUTPUT:

    The remainder `r`, or a pair `(r, q)` if ``quotients`` is set. Here
    `q[i]` is the list of triples `(c, u, v)`, one for each reduction step
    which subtracted `c u g_i v` from the current polynomial, where `g_i` is
    ``basis[i]``. We have `f = \sum_i \sum_{(c, u, v) \in q[i]} c u g_i v + r`,
    and no monomial of `r` contains the leading monomial of a visible basis
    element.

    In each step, the leading term of the current polynomial is reduced with
    the first basis element whose leading monomial occurs in it, at its
    leftmost occurrence. If there is none, the term is moved to the
    remainder.

    The polynomial `f` is not modified.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: from nc_algebra.division import divide
        sage: A.<a,b> = NCAlgebra(QQ, order='elim')
        sage: divide(b*b*a*a - a*a*b*b + a*b*a, [a*b*a - b, b^2*a - a*b^2])
        b
        sage: divide(b*b*a*a - a*a*b*b + a*b*a, [a*b*a - b, b^2*a - a*b^2], hidden=[0])
        a*b*a
        sage: divide(a, [])
        a
        sage: divide(2*a^2 + 3, [a^2 + 1], quotients=True)
        (1, [[Quotient(coefficient=2, left=(), right=())]])

    Only divisions which perform a reduction step are logged::

        sage: import logging
        sage: logging.basicConfig()
        sage: logger = logging.getLogger("nc_algebra.division")
        sage: logger.setLevel(logging.DEBUG)
        sage: divide(b, [a^2 + 1])
        b
        sage: divide(2*a^2 + 3, [a^2 + 1])
        DEBUG:nc_algebra.division:division: 1 reduction steps, remainder with 1 terms
        1
        sage: logger.setLevel(logging.WARNING)
    """
    def info(i, msg):
        if infolevel >= i:
            print(msg)

    info(1, lazy_string(lambda: datetime.today().ctime() + ": division by " + str(len(basis)) + " polynomials started."))

    hidden = frozenset(hidden or ())
    divisors = []
    for i, g in enumerate(basis):
        if i in hidden or not g:
            continue
        if g.parent() is not f.parent():
            raise TypeError("the divisors must belong to the parent of the dividend")
        divisors.append((i, g.leading_monomial(), g.lc()))

    quo = [[] for g in basis] if quotients else None
    p = f._copy()
    r = f._new()
    steps = 0

    while p:
        c, w = p.leading_term()
        for i, u, lc in divisors:
            k = monomial_find(w, u)
            if k >= 0:
                break
        else:
            p._add_term(-1, c, w)
            r._add_term(1, c, w)
            continue
        q = c/lc
        left, right = w[:k], w[k + len(u):]
        if quo is not None:
            quo[i].append(Quotient(q, left, right))
        p._add_multiple(-1, q, left, basis[i], right)
        steps += 1
        info(2, lazy_string(lambda: "reduced with basis element #" + str(i) + ", " + str(len(p)) + " terms left."))

    if steps:
        logger.debug("division: %d reduction steps, remainder with %d terms", steps, len(r))
    info(1, lazy_string(lambda: datetime.today().ctime() + ": division completed."))

    if quotients:
        return r, quo
    return r

def reconstruct(remainder, quotient, basis):
    r"""
    Return `\sum_i \sum_{(c, u, v) \in q[i]} c u g_i v + r`, where `r` is the
    remainder and `q` the quotient returned by ``divide`` for ``basis``.
    """
    p = remainder._copy()
    for g, steps in zip(basis, quotient):
        for c, left, right in steps:
            p._add_multiple(1, c, left, g, right)
    return p

"""
Monomials and monomial orders

A monomial of a free algebra with generators `x_0, ..., x_{n-1}` is a word
over the alphabet `\{0, ..., n-1\}`. Words are stored as tuples of generator
indices; the empty tuple is the unit monomial.

EXAMPLES::

    sage: from nc_algebra.monomial import Deglex, ElimOrder
    sage: Deglex.cmp((1,1,1), (1,1,0,0))
    -1
    sage: Deglex.cmp((1,1,1), (1,1,0))
    1
    sage: Deglex.cmp((1,1,1), (1,2,0))
    -1
    sage: ElimOrder.cmp((1,1,1), (1,1,0,0))
    1
    sage: ElimOrder.cmp((1,1), (1,1,0,0))
    -1
    sage: ElimOrder.cmp((0,0,1,1), (1,1,0,0))
    -1
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

MAX_GENERATORS = 256

def monomial_find(w, u):
    r"""
    Return the smallest index `i` such that ``w[i:i+len(u)] == u``, or `-1`
    if `u` does not occur in `w` as a contiguous factor.

    EXAMPLES::

        sage: from nc_algebra.monomial import monomial_find
        sage: monomial_find((2,0,0,1,0), (0,1))
        2
        sage: monomial_find((2,0,0,1,0), (1,1))
        -1
        sage: monomial_find((2,0), ())
        0
    """
    n, m = len(w), len(u)
    for i in range(n - m + 1):
        if w[i:i + m] == u:
            return i
    return -1

def monomial_cut_prefix(w, u):
    r"""
    Return ``(v, True)`` if `w = u v`, and ``(w, False)`` otherwise.
    """
    m = len(u)
    if w[:m] == u:
        return w[m:], True
    return w, False

def monomial_cut_suffix(w, u):
    r"""
    Return ``(v, True)`` if `w = v u`, and ``(w, False)`` otherwise.

    EXAMPLES::

        sage: from nc_algebra.monomial import monomial_cut_prefix, monomial_cut_suffix
        sage: monomial_cut_suffix((0,1,2), (1,2))
        ((0,), True)
        sage: monomial_cut_suffix((0,1,2), (0,1))
        ((0, 1, 2), False)
        sage: monomial_cut_prefix((0,1,2), (0,1))
        ((2,), True)
    """
    k = len(w) - len(u)
    if k >= 0 and w[k:] == u:
        return w[:k], True
    return w, False

def monomial_repr(w, symbol_name, mult="*", power="%s^%s"):
    r"""
    Return a string representation of the word `w`, in which runs of equal
    symbols are written as powers. ``symbol_name`` maps a generator index to
    its printed name; ``mult`` and ``power`` are the formats of products
    and powers.

    EXAMPLES::

        sage: from nc_algebra.monomial import monomial_repr
        sage: monomial_repr((1,1,0,1), lambda s: "ab"[s])
        'b^2*a*b'
        sage: monomial_repr((), str)
        '1'
    """
    if not w:
        return "1"
    factors = []
    prev, exponent = w[0], 1
    for s in w[1:]:
        if s == prev:
            exponent += 1
            continue
        factors.append(_power_repr(symbol_name(prev), exponent, power))
        prev, exponent = s, 1
    factors.append(_power_repr(symbol_name(prev), exponent, power))
    return mult.join(factors)

def _power_repr(name, exponent, power):
    if exponent == 1:
        return name
    return power % (name, exponent)

class MonomialOrder(object):
    r"""
    A total order on words which is compatible with concatenation.

    Subclasses implement ``key``, which maps a word to a sort key such that
    Python's native comparison of keys agrees with the order.
    """

    name = None

    def key(self, w):
        raise NotImplementedError

    def cmp(self, u, v):
        r"""
        Return `-1`, `0` or `1` according as `u` is smaller than, equal to or
        larger than `v`.
        """
        ku, kv = self.key(u), self.key(v)
        return (ku > kv) - (ku < kv)

    __call__ = cmp

    def max(self, words):
        return max(words, key=self.key)

    def __eq__(self, other):
        return type(self) is type(other)

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.name)

    def __reduce__(self):
        return (monomial_order, (self.name,))

    def __repr__(self):
        return "%s order" % self.name

class DeglexOrder(MonomialOrder):
    r"""
    Degree lexicographic order: longer words are larger, words of equal
    length are compared symbol by symbol.
    """

    name = "deglex"

    def key(self, w):
        return (len(w), w)

class EliminationOrder(MonomialOrder):
    r"""
    Elimination order: words are first compared as commutative monomials,
    i.e., by their symbols sorted in descending order, and ties are broken
    lexicographically by the words themselves.

    Any word containing a generator with a larger index is larger than every
    word in the smaller generators only, which makes Groebner bases with
    respect to this order useful for elimination.
    """

    name = "elim"

    def key(self, w):
        return (tuple(sorted(w, reverse=True)), w)

Deglex = DeglexOrder()
ElimOrder = EliminationOrder()

_orders = {"deglex": Deglex, "elim": ElimOrder}

def monomial_order(order):
    r"""
    Return the monomial order designated by ``order``, which can be a name
    (``'deglex'`` or ``'elim'``) or an order object.

    EXAMPLES::

        sage: from nc_algebra.monomial import monomial_order
        sage: monomial_order('elim')
        elim order
        sage: monomial_order('lex')
        Traceback (most recent call last):
        ...
        ValueError: unknown monomial order: 'lex'
    """
    if isinstance(order, MonomialOrder):
        return order
    try:
        return _orders[order]
    except (KeyError, TypeError):
        raise ValueError("unknown monomial order: %r" % (order,))

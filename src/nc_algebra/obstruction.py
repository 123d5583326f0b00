"""
Obstructions

An obstruction of two polynomials `g_i` and `g_j` is a tuple
`(i, j, l_i, r_i, l_j, r_j)` of indices and monomials such that
`l_i \operatorname{lm}(g_i) r_i = l_j \operatorname{lm}(g_j) r_j`. It gives
rise to the S-polynomial

.. MATH::

    \frac{1}{\operatorname{lc}(g_i)} l_i g_i r_i
    - \frac{1}{\operatorname{lc}(g_j)} l_j g_j r_j

whose leading term is smaller than the common word. This module enumerates
the obstructions induced by a new element of a basis and discards
superfluous ones with the criteria of Gebauer-Moeller type for free algebras
(see Xiu's thesis and Hofstadler's notes on noncommutative Groebner bases).

EXAMPLES::

    sage: from nc_algebra import NCAlgebra
    sage: from nc_algebra.obstruction import Obstruction, update_obstructions
    sage: A.<a,b> = NCAlgebra(QQ)
    sage: g = [a*b*a - b, b*a*b - b]
    sage: update_obstructions([Obstruction(0, 0, (0,1), (), (), (1,0))], g, A.order())
    [Obstruction(0, 1, (1,), (), (), (0,)), Obstruction(0, 1, (), (1,), (0,), ())]
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

from .monomial import monomial_find, monomial_cut_prefix, monomial_cut_suffix

logger = logging.getLogger(__name__)

class Obstruction(object):
    r"""
    An obstruction `(i, j, l_i, r_i, l_j, r_j)` of the basis elements with
    indices `i` and `j`.

    The slot ``s_polynomial`` caches the S-polynomial for algorithms which
    compute it eagerly, and ``removed`` marks obstructions discarded by a
    criterion during an update.
    """

    __slots__ = ("i", "j", "i_left", "i_right", "j_left", "j_right", "s_polynomial", "removed")

    def __init__(self, i, j, i_left=(), i_right=(), j_left=(), j_right=()):
        self.i = i
        self.j = j
        self.i_left = tuple(i_left)
        self.i_right = tuple(i_right)
        self.j_left = tuple(j_left)
        self.j_right = tuple(j_right)
        self.s_polynomial = None
        self.removed = False

    def _key(self):
        return (self.i, self.j, self.i_left, self.i_right, self.j_left, self.j_right)

    def __eq__(self, other):
        if not isinstance(other, Obstruction):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        if not isinstance(other, Obstruction):
            return NotImplemented
        return self._key() != other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "Obstruction(%r, %r, %r, %r, %r, %r)" % self._key()

    def word(self, lm_j):
        r"""
        Return the common word `l_j m r_j`, where `m` is the leading monomial
        ``lm_j`` of the `j`-th basis element.
        """
        return self.j_left + lm_j + self.j_right

def s_polynomial(o, basis):
    r"""
    Return the S-polynomial of the obstruction `o` of ``basis``.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: from nc_algebra.obstruction import Obstruction, s_polynomial
        sage: A.<a,b> = NCAlgebra(QQ)
        sage: g = [a*b*a - b, b*a*b - b]
        sage: s_polynomial(Obstruction(0, 1, (1,), (), (), (0,)), g)
        -b^2 + b*a
    """
    gi, gj = basis[o.i], basis[o.j]
    s = gi._new()
    s._add_multiple(1, ~gi.lc(), o.i_left, gi, o.i_right)
    s._add_multiple(-1, ~gj.lc(), o.j_left, gj, o.j_right)
    return s

# enumeration

def left_obstructions(i, j, lm_i, lm_j):
    r"""
    Return the obstructions in which a prefix of `lm_i` overlaps with a
    suffix of `lm_j`, i.e., `l_i lm_i = lm_j r_j`.
    """
    out = []
    if i == j:
        i_end, j_start = len(lm_i) - 1, 1
    elif len(lm_i) < len(lm_j):
        i_end, j_start = len(lm_i), len(lm_j) - len(lm_i)
    else:
        i_end, j_start = len(lm_j), 0
    while j_start < len(lm_j):
        if lm_i[:i_end] == lm_j[j_start:]:
            out.append(Obstruction(i, j, i_left=lm_j[:j_start], j_right=lm_i[i_end:]))
        i_end -= 1
        j_start += 1
    return out

def right_obstructions(i, j, lm_i, lm_j):
    r"""
    Return the obstructions in which a suffix of `lm_i` overlaps with a
    prefix of `lm_j`, i.e., `lm_i r_i = l_j lm_j`.
    """
    out = []
    if i == j:
        i_start, j_end = 1, len(lm_j) - 1
    elif len(lm_i) < len(lm_j):
        i_start, j_end = 0, len(lm_i)
    else:
        i_start, j_end = len(lm_i) - len(lm_j), len(lm_j)
    while i_start < len(lm_i):
        if lm_i[i_start:] == lm_j[:j_end]:
            out.append(Obstruction(i, j, i_right=lm_j[j_end:], j_left=lm_i[:i_start]))
        i_start += 1
        j_end -= 1
    return out

def center_obstructions(i, j, lm_i, lm_j):
    r"""
    Return the obstructions in which one leading monomial occurs strictly
    inside the other one.
    """
    out = []
    if len(lm_i) < len(lm_j):
        for start in range(1, len(lm_j) - len(lm_i)):
            end = start + len(lm_i)
            if lm_j[start:end] == lm_i:
                out.append(Obstruction(i, j, i_left=lm_j[:start], i_right=lm_j[end:]))
    else:
        for start in range(1, len(lm_i) - len(lm_j)):
            end = start + len(lm_j)
            if lm_i[start:end] == lm_j:
                out.append(Obstruction(i, j, j_left=lm_i[:start], j_right=lm_i[end:]))
    return out

def overlap_obstructions(basis, s):
    r"""
    Return all obstructions of the basis element with index `s` with the
    elements before it and with itself.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: from nc_algebra.obstruction import overlap_obstructions
        sage: A.<a,b> = NCAlgebra(QQ)
        sage: overlap_obstructions([a*b*a - b], 0)
        [Obstruction(0, 0, (), (1, 0), (0, 1), ())]
        sage: overlap_obstructions([a*b, b*a], 1)
        [Obstruction(0, 1, (1,), (), (), (1,)), Obstruction(0, 1, (), (0,), (0,), ())]
    """
    lm_s = basis[s].leading_monomial()
    out = []
    for i in range(s):
        lm_i = basis[i].leading_monomial()
        out.extend(left_obstructions(i, s, lm_i, lm_s))
        out.extend(right_obstructions(i, s, lm_i, lm_s))
        out.extend(center_obstructions(i, s, lm_i, lm_s))
    out.extend(right_obstructions(s, s, lm_s, lm_s))
    return out

# criteria

def has_overlap(o, lm_i, lm_j):
    r"""
    Return whether the occurrences of `lm_i` and `lm_j` in the common word
    of `o` share at least one position.
    """
    if len(o.i_left) + len(lm_i) <= len(o.j_left):
        return False
    if len(lm_i) + len(o.i_right) <= len(o.j_right):
        return False
    return True

def shrink(o):
    r"""
    Return the obstruction obtained from `o` by removing the common prefix
    of the left contexts and the common suffix of the right contexts.

    EXAMPLES::

        sage: from nc_algebra.obstruction import Obstruction, shrink
        sage: shrink(Obstruction(1, 2, (1,2,1), (), (1,), (1,1,2,1,2)))
        Obstruction(1, 2, (2, 1), (), (), (1, 1, 2, 1, 2))
        sage: shrink(Obstruction(1, 2, (1,2,1,1), (), (1,2), (2,)))
        Obstruction(1, 2, (1, 1), (), (), (2,))
        sage: shrink(Obstruction(2, 3, (2,), (2,1,2), (), (1,1,1,2)))
        Obstruction(2, 3, (2,), (2,), (), (1, 1))
        sage: shrink(Obstruction(3, 4, (2,2,1,2), (1,1,2), (2,2,2), (2,1,2)))
        Obstruction(3, 4, (1, 2), (1,), (2,), (2,))
    """
    n = min(len(o.i_left), len(o.j_left))
    start = n
    for k in range(n):
        if o.i_left[k] != o.j_left[k]:
            start = k
            break
    n = min(len(o.i_right), len(o.j_right))
    end = n
    for k in range(n):
        if o.i_right[-1 - k] != o.j_right[-1 - k]:
            end = k
            break
    return Obstruction(o.i, o.j, o.i_left[start:], o.i_right[:len(o.i_right) - end],
                       o.j_left[start:], o.j_right[:len(o.j_right) - end])

def remove_4b(new, order):
    r"""
    Mark the new obstructions which are multiples of other new obstructions
    with the same second index.

    Among two obstructions `o` and `o'` with `l_j = w l'_j` and
    `r_j = r'_j w'`, the obstruction `o` is removed if its first index is
    larger, or if the padding `w, w'` is nontrivial; identical paddings and
    indices are decided by comparing the left contexts `l_i` in ``order``.

    EXAMPLES::

        sage: from nc_algebra.monomial import Deglex
        sage: from nc_algebra.obstruction import Obstruction, remove_4b
        sage: new = [Obstruction(2, 2, (2,1), (), (), (1,2)),
        ....:        Obstruction(1, 2, (), (2,), (1,), ()),
        ....:        Obstruction(1, 2, (2,), (), (), (1,))]
        sage: remove_4b(new, Deglex)
        sage: [o for o in new if not o.removed]
        [Obstruction(1, 2, (), (2,), (1,), ()), Obstruction(1, 2, (2,), (), (), (1,))]
        sage: new = [Obstruction(1, 2, (1,2), (), (), ()),
        ....:        Obstruction(1, 2, (), (1,2), (), ()),
        ....:        Obstruction(2, 2, (), (1,2), (1,2), ())]
        sage: remove_4b(new, Deglex)
        sage: [o for o in new if not o.removed]
        [Obstruction(1, 2, (), (1, 2), (), ())]
        sage: new = [Obstruction(1, 1, (1,2,3), (), (1,2), (2,1)),
        ....:        Obstruction(1, 1, (1,2), (), (1,2), (2,1))]
        sage: remove_4b(new, Deglex)
        sage: [o for o in new if not o.removed]
        [Obstruction(1, 1, (1, 2), (), (1, 2), (2, 1))]
    """
    for k, o in enumerate(new):
        for l, p in enumerate(new):
            if l == k or p.removed:
                continue
            w, ok = monomial_cut_suffix(o.j_left, p.j_left)
            if not ok:
                continue
            w_right, ok = monomial_cut_prefix(o.j_right, p.j_right)
            if not ok:
                continue
            trivial = not w and not w_right
            if o.i > p.i or not trivial or (o.i == p.i and order.cmp(o.i_left, p.i_left) > 0):
                o.removed = True
                break

def remove_4c(new, old, lm_s):
    r"""
    Mark the new obstructions which factor through an old obstruction whose
    second index is the first index of the new one; ``lm_s`` is the leading
    monomial of the new basis element.

    EXAMPLES::

        sage: from nc_algebra.obstruction import Obstruction, remove_4c
        sage: new = [Obstruction(1, 3, (), (1,), (), ()),
        ....:        Obstruction(1, 3, (1,2), (), (), (2,)),
        ....:        Obstruction(2, 3, (), (), (), (2,)),
        ....:        Obstruction(2, 3, (1,2), (), (), (2,1,2)),
        ....:        Obstruction(3, 3, (), (2,1), (1,2), ())]
        sage: old = [Obstruction(1, 2, (1,2), (), (), ()),
        ....:        Obstruction(1, 2, (), (1,2), (), ()),
        ....:        Obstruction(2, 2, (), (1,2), (1,2), ())]
        sage: remove_4c(new, old, (1,2,1))
        sage: [o for o in new if o.removed]
        [Obstruction(2, 3, (1, 2), (), (), (2, 1, 2))]
    """
    for o in new:
        for p in old:
            if p.j != o.i:
                continue
            w, ok = monomial_cut_suffix(o.i_left, p.j_left)
            if not ok:
                continue
            w_right, ok = monomial_cut_prefix(o.i_right, p.j_right)
            if not ok:
                continue
            if (len(o.j_left) + len(lm_s) <= len(w) + len(p.i_left)
                    or len(lm_s) + len(o.j_right) <= len(p.i_right) + len(w_right)):
                o.removed = True
                break

def remove_4d(old, new, basis):
    r"""
    Mark the old obstructions `(i, j, \dots)` whose common word contains the
    leading monomial of the new basis element `g_s` at a position such that
    both chain obstructions `(i, s, \dots)` and `(j, s, \dots)` are either
    without overlap or, after shrinking, among the new obstructions.
    """
    s = len(basis) - 1
    lm_s = basis[s].leading_monomial()
    for o in old:
        lm_i = basis[o.i].leading_monomial()
        lm_j = basis[o.j].leading_monomial()
        word = o.word(lm_j)
        start = 0
        while start < len(word):
            k = monomial_find(word[start:], lm_s)
            if k < 0:
                break
            k += start
            ws, ws_right = word[:k], word[k + len(lm_s):]
            start = k + 1
            ois = Obstruction(o.i, s, o.i_left, o.i_right, ws, ws_right)
            if has_overlap(ois, lm_i, lm_s) and shrink(ois) not in new:
                continue
            ojs = Obstruction(o.j, s, o.j_left, o.j_right, ws, ws_right)
            if has_overlap(ojs, lm_j, lm_s) and shrink(ojs) not in new:
                continue
            o.removed = True
            break

def update_obstructions(queue, basis, order):
    r"""
    Return the queue of obstructions after the last element of ``basis`` has
    been added to it.

    INPUT:

    - ``queue`` -- the list of pending obstructions of ``basis[:-1]``
    - ``basis`` -- a list of nonzero polynomials
    - ``order`` -- the monomial order of their parent

    OUTPUT:

    The surviving old obstructions, in their original order, followed by the
    surviving new ones. The obstructions in ``queue`` are not modified,
    except for the removal flags of those which are discarded.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: from nc_algebra.obstruction import Obstruction, update_obstructions
        sage: A.<a,b> = NCAlgebra(QQ)
        sage: g = [a*b*a - b, b*a*b - b, b^2 - a*b, b*a - a*b]
        sage: queue = [Obstruction(2, 2, (1,), (), (), (1,)),
        ....:          Obstruction(1, 2, (1,), (), (), (0,1)),
        ....:          Obstruction(1, 2, (), (1,), (1,0), ())]
        sage: for o in update_obstructions(queue, g, A.order()):
        ....:     print(o)
        Obstruction(2, 2, (1,), (), (), (1,))
        Obstruction(0, 3, (), (), (0,), ())
        Obstruction(1, 3, (), (), (), (1,))
        Obstruction(2, 3, (), (0,), (1,), ())
    """
    s = len(basis) - 1
    new = overlap_obstructions(basis, s)
    total = len(new)

    remove_4b(new, order)
    new = [o for o in new if not o.removed]
    removed_4b = total - len(new)

    remove_4c(new, queue, basis[s].leading_monomial())
    survivors = [o for o in new if not o.removed]
    removed_4c = len(new) - len(survivors)

    remove_4d(queue, survivors, basis)
    old = [o for o in queue if not o.removed]

    logger.debug("basis element #%d: %d new obstructions, criteria removed %d (4b), %d (4c), %d (4d)",
                 s, total, removed_4b, removed_4c, len(queue) - len(old))
    return old + survivors

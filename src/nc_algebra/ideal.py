"""
Ideals and Groebner bases
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
from collections import deque
from datetime import datetime

from sage.misc.lazy_string import lazy_string
from sage.rings.noncommutative_ideals import Ideal_nc
from sage.structure.all import coercion_model

from .division import divide
from .monomial import monomial_find
from .nc_polynomial import NCPolynomial
from .obstruction import s_polynomial, update_obstructions

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 1000

class NonHomogeneousError(ValueError):
    pass

def _common_parent(gens):
    r"""
    Coerce the polynomials ``gens`` into a common parent.
    """
    gens = list(gens)
    if not gens:
        raise ValueError("the list of generators must not be empty")
    A = coercion_model.common_parent(*gens)
    gens = [A(g) for g in gens]
    if not all(isinstance(g, NCPolynomial) for g in gens):
        raise TypeError("the generators must be noncommutative polynomials")
    return gens

def _finalize(basis):
    basis = [g.monic() for g in interreduce(basis)]
    basis.sort(key=lambda g: g._cmp_key())
    return basis

def interreduce(polys):
    r"""
    Return the list obtained from ``polys`` by reducing each element by all
    the others until nothing changes.

    Elements which reduce to zero are dropped. Whenever an element changes,
    the scan starts over with the first element, so the output is a fixed
    point: no monomial of any element contains the leading monomial of
    another one.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: from nc_algebra.ideal import interreduce
        sage: A.<y,x> = NCAlgebra(QQ)
        sage: interreduce([x^2 - 1, x - y])
        [y^2 - 1, x - y]
        sage: interreduce([x*y, x*y*x + y, 0, 2*x*y])
        [y]
        sage: G = interreduce([x^3 - y, x^2*y + x, y*x*y])
        sage: interreduce(G) == G
        True
    """
    g = list(polys)
    alive = [bool(p) for p in g]
    i = 0
    while i < len(g):
        if not alive[i]:
            i += 1
            continue
        alive[i] = False
        r = divide(g[i], g, hidden=[k for k in range(len(g)) if not alive[k]])
        if not r:
            logger.debug("interreduce: element #%d reduces to zero", i)
            i += 1
        elif r != g[i]:
            g[i] = r
            alive[i] = True
            i = 0
        else:
            alive[i] = True
            i += 1
    return [g[k] for k in range(len(g)) if alive[k]]

def buchberger(gens, max_iterations, infolevel=0):
    r"""
    Compute a Groebner basis of the two-sided ideal generated by ``gens``.

    INPUT:

    - ``gens`` -- a nonempty list of noncommutative polynomials
    - ``max_iterations`` -- the maximal number of obstructions to process
    - ``infolevel`` (default: 0) -- verbosity of progress reports

    OUTPUT:

    A pair ``(G, complete)``, where `G` is a sorted list of monic
    polynomials generating the same ideal as ``gens`` and ``complete``
    indicates whether all obstructions were processed, in which case `G` is
    the reduced Groebner basis. Free algebras are not noetherian, and the
    reduced Groebner basis may be infinite; then ``complete`` is ``False``
    for every budget.

    The obstructions are processed in the order in which they were created.
    Basis elements whose leading monomial contains the leading monomial of a
    later element are no longer used for reductions, and are removed from the
    output.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: from nc_algebra.ideal import buchberger
        sage: A.<y,x> = NCAlgebra(QQ)
        sage: buchberger([x^2 - 1, x - y], 10)
        ([x - y, y^2 - 1], True)

    With respect to the elimination order, the ideal generated by `aba - b`
    also contains `b^2a - ab^2`; one iteration is not enough to see that
    nothing else is needed::

        sage: A.<a,b> = NCAlgebra(QQ, order='elim')
        sage: buchberger([a*b*a - b], 1)
        ([a*b*a - b, b^2*a - a*b^2], False)
        sage: G, complete = buchberger([a*b*a - b], 10); G, complete
        ([a*b*a - b, b^2*a - a*b^2], True)
        sage: (b*b*a*a - a*a*b*b + a*b*a).reduce(G)
        b

    Display some information on what is going on::

        sage: import logging
        sage: logging.basicConfig()
        sage: logger = logging.getLogger('nc_algebra.ideal')
        sage: logger.setLevel(logging.DEBUG)
        sage: buchberger([a*b*a - b], 1)
        DEBUG:nc_algebra.ideal:Buchberger algorithm stopped after 1 iterations with 1 obstructions left
        ([a*b*a - b, b^2*a - a*b^2], False)
        sage: logger.setLevel(logging.WARNING)

    Example 5.12 of Mora's "An introduction to commutative and noncommutative
    Groebner bases"::

        sage: A.<a,b> = NCAlgebra(QQ)
        sage: G, complete = buchberger([a*b*a - b, b*a*b - b], 10); G, complete
        ([b*a - a*b, b^2 - a*b, a^2*b - b], True)
        sage: (a*b*a*b).reduce(G) == (a*b).reduce(G)
        True

    Every S-polynomial of a complete basis reduces to zero, and the result does
    not depend on the run::

        sage: from nc_algebra.division import divide
        sage: from nc_algebra.obstruction import overlap_obstructions, s_polynomial
        sage: all(not divide(s_polynomial(o, G), G)
        ....:     for i in range(len(G)) for o in overlap_obstructions(G[:i+1], i))
        True
        sage: buchberger([a*b*a - b, b*a*b - b], 10) == (G, complete)
        True

    The generators need not be given in a common parent::

        sage: buchberger([2*a^2, 3], 10)
        ([1], True)
    """
    def info(i, msg):
        if infolevel >= i:
            print(msg)

    gens = _common_parent(gens)
    order = gens[0].parent().order()

    info(1, lazy_string(lambda: datetime.today().ctime() + ": Buchberger algorithm started."))

    g = interreduce(gens)
    if not g:
        return [], True

    queue = deque()
    for l in range(1, len(g) + 1):
        queue = deque(update_obstructions(queue, g[:l], order))
    hidden = set()

    info(2, lazy_string(lambda: str(len(g)) + " generators after interreduction, " + str(len(queue)) + " obstructions."))

    iterations = 0
    while queue and iterations < max_iterations:
        iterations += 1
        o = queue.popleft()
        r = divide(s_polynomial(o, g), g, hidden=hidden)
        if not r:
            continue
        g.append(r)
        queue = deque(update_obstructions(queue, g, order))

        lm = r.leading_monomial()
        for k in range(len(g) - 1):
            if k not in hidden and monomial_find(g[k].leading_monomial(), lm) >= 0:
                hidden.add(k)
                logger.debug("basis element #%d is superseded by #%d", k, len(g) - 1)

        info(2, lazy_string(lambda: datetime.today().ctime() + ": iteration " + str(iterations)
                            + ": new basis element of degree " + str(len(lm)) + ", "
                            + str(len(g) - len(hidden)) + " elements, " + str(len(queue)) + " obstructions."))

    complete = not queue
    if not complete:
        logger.debug("Buchberger algorithm stopped after %d iterations with %d obstructions left", iterations, len(queue))

    G = _finalize([g[k] for k in range(len(g)) if k not in hidden])
    info(1, lazy_string(lambda: datetime.today().ctime() + ": Buchberger algorithm completed. "
                        + str(len(G)) + " elements, complete=" + str(complete)))
    return G, complete

def buchberger_homogeneous(gens, max_degree, infolevel=0):
    r"""
    Compute the part of degree at most ``max_degree`` of the Groebner basis
    of the two-sided ideal generated by the homogeneous polynomials ``gens``.

    INPUT:

    - ``gens`` -- a nonempty list of homogeneous noncommutative polynomials
    - ``max_degree`` -- the degree bound
    - ``infolevel`` (default: 0) -- verbosity of progress reports

    OUTPUT:

    A pair ``(G, complete)``, where `G` is the sorted list of monic elements
    of degree at most ``max_degree`` of the reduced Groebner basis and
    ``complete`` indicates whether there are no elements of larger degree,
    i.e., whether `G` is the complete reduced Groebner basis.

    The computation proceeds degree by degree. In each degree, the
    generators are reduced first, then the S-polynomials; both are taken
    from the end of their lists. S-polynomials are computed as soon as the
    corresponding obstructions are created; obstructions whose S-polynomial
    is zero are discarded, and so are obstructions of degree larger than
    ``max_degree``, which makes the result incomplete.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: from nc_algebra.ideal import buchberger_homogeneous
        sage: A.<x,y,z> = NCAlgebra(QQ)
        sage: buchberger_homogeneous([x^2 - 2*y^2, x*y - 3*z^2], 3)
        ([y^2 - 1/2*x^2, z^2 - 1/3*x*y, y*x^2 - x^2*y, z*x*y - x*y*z], False)
        sage: G, complete = buchberger_homogeneous([x^2 - 2*y^2, x*y - 3*z^2], 5)
        sage: G
        [y^2 - 1/2*x^2,
         z^2 - 1/3*x*y,
         y*x^2 - x^2*y,
         z*x*y - x*y*z,
         z*x^3 - 2*x*y*z*y]
        sage: complete
        True
        sage: buchberger_homogeneous([2*x^2, y^3, z^7], 5)
        ([x^2, y^3], False)
        sage: buchberger_homogeneous([2*x^2, y^3, z^7], 7)
        ([x^2, y^3, z^7], True)
        sage: buchberger_homogeneous([x^2 - y], 5)
        Traceback (most recent call last):
        ...
        nc_algebra.ideal.NonHomogeneousError: x^2 - y is not homogeneous
    """
    def info(i, msg):
        if infolevel >= i:
            print(msg)

    gens = _common_parent(gens)
    for f in gens:
        if not f.is_homogeneous():
            raise NonHomogeneousError("%s is not homogeneous" % f)
    order = gens[0].parent().order()

    info(1, lazy_string(lambda: datetime.today().ctime() + ": homogeneous Buchberger algorithm started."))

    pending = [f for f in gens if f]
    basis = []
    queue = []
    dropped = [0]

    def extend(r):
        basis.append(r)
        new_queue = update_obstructions(queue, basis, order)
        del queue[:]
        queue.extend(new_queue)
        # new obstructions are at the end of the queue
        k = len(queue) - 1
        while k >= 0 and queue[k].s_polynomial is None:
            o = queue[k]
            o.s_polynomial = s = s_polynomial(o, basis)
            if not s:
                del queue[k]
            elif len(s.leading_monomial()) > max_degree:
                del queue[k]
                dropped[0] += 1
            k -= 1

    complete = False
    while True:
        if not pending and not queue:
            complete = dropped[0] == 0
            break
        d = min([len(f.leading_monomial()) for f in pending]
                + [len(o.s_polynomial.leading_monomial()) for o in queue])
        if d > max_degree:
            logger.debug("homogeneous Buchberger algorithm stopped at degree %d", d)
            break

        gd = [f for f in pending if len(f.leading_monomial()) == d]
        pending = [f for f in pending if len(f.leading_monomial()) != d]
        bd = [o for o in queue if len(o.s_polynomial.leading_monomial()) == d]
        queue[:] = [o for o in queue if len(o.s_polynomial.leading_monomial()) != d]

        info(2, lazy_string(lambda: datetime.today().ctime() + ": degree " + str(d) + ": "
                            + str(len(gd)) + " generators, " + str(len(bd)) + " obstructions."))

        while gd:
            r = divide(gd.pop(), basis)
            if r:
                extend(r)
        while bd:
            r = divide(bd.pop().s_polynomial, basis)
            if r:
                extend(r)

    G = _finalize(basis)
    info(1, lazy_string(lambda: datetime.today().ctime() + ": homogeneous Buchberger algorithm completed. "
                        + str(len(G)) + " elements, complete=" + str(complete)))
    return G, complete

class NCTwoSidedIdeal(Ideal_nc):
    r"""
    Two-sided ideal of a free algebra.

    EXAMPLES::

        sage: from nc_algebra import NCAlgebra
        sage: A.<a,b> = NCAlgebra(QQ)
        sage: I = A.ideal([a*b*a - b, b*a*b - b])
        sage: I.side(), I.ngens(), I.base_ring()
        ('twosided', 2, Rational Field)
        sage: I.groebner_basis()
        [b*a - a*b, b^2 - a*b, a^2*b - b]
        sage: I.is_complete()
        True
        sage: a^2*b*a - b*a in I
        True
        sage: a in I
        False
        sage: I.reduce(b*a*a)
        b
        sage: I == A.ideal([a*b*a - b, b*a*b - b])
        True
    """

    def __init__(self, ring, gens, coerce=True):
        self.__gb = {}
        self.__last = None
        Ideal_nc.__init__(self, ring, gens, coerce, "twosided")

    def groebner_basis(self, max_iterations=None, max_degree=None, infolevel=0):
        r"""
        Returns a Groebner basis of this ideal.

        INPUT:

        - ``max_iterations`` -- the maximal number of obstructions processed
          by the Buchberger algorithm (default: ``DEFAULT_MAX_ITERATIONS``)
        - ``max_degree`` -- if given, compute the Groebner basis up to this
          degree with the homogeneous variant of the algorithm; all
          generators must then be homogeneous
        - ``infolevel`` -- integer indicating the verbosity of progress reports

        OUTPUT:

        The list of elements of the reduced Groebner basis, or of a truncation
        of it if the computation did not finish, see :meth:`is_complete`. The
        output is cached.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<x,y,z> = NCAlgebra(QQ)
            sage: I = A.ideal([2*x^2, y^3, z^7])
            sage: I.groebner_basis(max_degree=5)
            [x^2, y^3]
            sage: I.is_complete()
            False
            sage: I.groebner_basis(max_degree=7)
            [x^2, y^3, z^7]
            sage: I.is_complete()
            True
            sage: A.ideal([x^2 - y]).groebner_basis(max_degree=3)
            Traceback (most recent call last):
            ...
            nc_algebra.ideal.NonHomogeneousError: x^2 - y is not homogeneous
        """
        if max_degree is not None:
            key = ("degree", max_degree)
        else:
            key = ("iterations", DEFAULT_MAX_ITERATIONS if max_iterations is None else max_iterations)
        gens = self.gens()
        try:
            G, complete = self.__gb[key]
        except KeyError:
            if key[0] == "degree":
                G, complete = buchberger_homogeneous(gens, max_degree, infolevel=infolevel)
            elif not any(gens):
                G, complete = [], True
            else:
                G, complete = buchberger(gens, key[1], infolevel=infolevel)
            self.__gb[key] = (G, complete)
        self.__last = key
        return list(G)

    def __basis(self):
        if self.__last is None:
            self.groebner_basis()
        return self.__gb[self.__last]

    def is_complete(self):
        r"""
        Returns whether the last Groebner basis computed for this ideal is
        complete, or ``None`` if no basis has been computed yet.
        """
        if self.__last is None:
            return None
        return self.__gb[self.__last][1]

    def reduce(self, p):
        r"""
        Reduces `p` with respect to the Groebner basis of this ideal which was
        computed last; if there is none, the basis is computed with the
        default parameters.
        """
        return self.ring()(p).reduce(self.__basis()[0])

    def contains(self, p, proof=False):
        r"""
        Checks whether `p` belongs to this ideal.

        The Groebner basis computed last is used. If ``proof`` is set and it
        is not complete, a nonzero remainder does not prove that `p` is
        not a member, and an error is raised instead.

        EXAMPLES::

            sage: from nc_algebra import NCAlgebra
            sage: A.<a,b> = NCAlgebra(QQ, order='elim')
            sage: I = A.ideal([a*b*a - b])
            sage: I.groebner_basis(max_iterations=1)
            [a*b*a - b, b^2*a - a*b^2]
            sage: I.is_complete()
            False
            sage: I.contains(b^2*a - a*b^2)
            True
            sage: I.contains(b, proof=True)
            Traceback (most recent call last):
            ...
            ValueError: membership cannot be decided with an incomplete Groebner basis
        """
        G, complete = self.__basis()
        if self.ring()(p).reduce(G).is_zero():
            return True
        if proof and not complete:
            raise ValueError("membership cannot be decided with an incomplete Groebner basis")
        return False

    def __contains__(self, p):
        return self.contains(p)

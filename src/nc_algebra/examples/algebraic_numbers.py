r"""
Minimal polynomial of `\sqrt 2 + \sqrt 3 + \sqrt 5`

The variables `x, y, z` stand for `\sqrt 2, \sqrt 3, \sqrt 5` and `a` for
their sum. Since all of them commute, the commutators are added to the
ideal. With respect to the elimination order in which `a` is the smallest
variable, the first element of the Groebner basis is the minimal polynomial
of `a`, and the remaining elements express `x, y, z` in terms of `a`::

    sage: from nc_algebra.examples.algebraic_numbers import ideal
    sage: G = ideal.groebner_basis(max_iterations=50)  # long time
    sage: for g in G:  # long time
    ....:     print(g)
    a^8 - 40*a^6 + 352*a^4 - 960*a^2 + 576
    z - 5/576*a^7 + 97/288*a^5 - 95/36*a^3 + 53/12*a
    y + 1/96*a^7 - 37/96*a^5 + 61/24*a^3 - 15/4*a
    x - 1/576*a^7 + 7/144*a^5 + 7/72*a^3 - 5/3*a

The minimal polynomial indeed vanishes at `\sqrt 2 + \sqrt 3 + \sqrt 5`::

    sage: alpha = QQbar(2).sqrt() + QQbar(3).sqrt() + QQbar(5).sqrt()
    sage: P = G[0]  # long time
    sage: sum(c*alpha^len(w) for c, w in P.terms()) == 0  # long time
    True
"""

from sage.rings.rational_field import QQ

from nc_algebra import NCAlgebra

A = NCAlgebra(QQ, 'a,z,y,x', order='elim')

relations = [
    "x^2 - 2",
    "y^2 - 3",
    "z^2 - 5",
    "a - x - y - z",
    "x*y - y*x",
    "x*z - z*x",
    "x*a - a*x",
    "y*z - z*y",
    "y*a - a*y",
    "z*a - a*z",
]

ideal = A.ideal([A(p) for p in relations])

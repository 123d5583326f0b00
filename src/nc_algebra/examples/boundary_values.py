r"""
Green's operator of a two-point boundary value problem

after Rosenkranz, Buchberger and Engl, *Solving linear boundary value
problems via non-commutative Groebner bases*, Applicable Analysis 82(7),
2003.

The operators are `D` (differentiation), `A` and `B` (integration from the
left and from the right endpoint), `L` and `R` (evaluation at the
endpoints), `X` (multiplication by the independent variable) and the
unknown Green's operator `G` of the problem `u'' = f`, `u(0) = u(1) = 0`.
Eliminating with `G` as the largest variable, the last element of the
Groebner basis expresses `G` in terms of the other operators::

    sage: from nc_algebra.examples.boundary_values import ideal
    sage: G = ideal.groebner_basis(max_iterations=50)  # long time
    sage: G[-1]  # long time
    G - X*B*X + X*B - X*A*X + A*X
"""

from sage.rings.rational_field import QQ

from nc_algebra import NCAlgebra

A = NCAlgebra(QQ, 'D,L,X,A,B,R,G', order='elim')

equations = [
    "D^2*G*D^2 - D^2",
    "G*D^2*G - G",
    "G*D^2 - 1 + (1 - X)*L + X*R",
    "D^2*G - 1",
    "D*X - X*D - 1",
    "D*A - 1",
    "A*D - 1 + L",
    "D*B + 1",
    "B*D - R + 1",
    "R*X - R",
    "L*X",
]

ideal = A.ideal([A(p) for p in equations])

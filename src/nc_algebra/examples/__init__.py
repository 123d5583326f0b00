r"""
Index of examples

The following submodules provide systems of noncommutative polynomials from
various applications along with the computations that one can do with them.

.. autosummary::

    algebraic_numbers
    boundary_values

::

    sage: from nc_algebra.examples import algebraic_numbers, boundary_values
    sage: algebraic_numbers.A
    Free algebra in a, z, y, x over Rational Field with elim order
    sage: len(boundary_values.equations)
    11
"""

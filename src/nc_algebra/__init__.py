#############################################################################
#  Copyright (C) 2024, 2025                                                 #
#                The nc_algebra developers                                  #
#                                                                           #
#  Distributed under the terms of the GNU General Public License (GPL)      #
#                                                                           #
#  http://www.gnu.org/licenses/                                             #
#############################################################################

from .monomial import Deglex, ElimOrder, monomial_order
from .nc_algebra import NCAlgebra, is_NCAlgebra
from .nc_polynomial import NCPolynomial
from .division import divide, reconstruct, Quotient
from .obstruction import Obstruction
from .ideal import buchberger, buchberger_homogeneous, interreduce, NCTwoSidedIdeal, NonHomogeneousError
from .finite_field import PrimeFieldExtension, irreducible_polynomial

#########################################################################################
##
##                      BASE CLASS FOR EXPLICIT RUNGE-KUTTA TABLES
##                               (tables/_tableau.py)
##
##         Butcher tableau with embedded weights and a polynomial interpolant
##          basis for dense output, plus the order condition checks based on
##                                  rooted trees
##
#########################################################################################

# IMPORTS ===============================================================================

import functools

import numpy as np

from numpy.polynomial import Polynomial


# ROOTED TREES ==========================================================================

@functools.lru_cache(maxsize=None)
def _trees(order):
    """All rooted trees with 'order' nodes. A tree is the sorted
    tuple of the subtrees attached to its root.

    Parameters
    ----------
    order : int
        number of nodes

    Returns
    -------
    trees : tuple[tuple]
        all distinct rooted trees of that order
    """
    return tuple(sorted(_forests(order - 1)))


@functools.lru_cache(maxsize=None)
def _forests(order):
    """All unordered collections of rooted trees with
    'order' nodes in total.
    """
    if order == 0:
        return frozenset({()})

    forests = set()
    for k in range(1, order + 1):
        for tree in _trees(k):
            for rest in _forests(order - k):
                forests.add(tuple(sorted((tree,) + rest)))
    return frozenset(forests)


def _tree_order(tree):
    return 1 + sum(_tree_order(child) for child in tree)


def _tree_density(tree):
    """Density 'gamma' of a rooted tree, the exact solution
    of the order condition is '1/gamma'.
    """
    gamma = _tree_order(tree)
    for child in tree:
        gamma *= _tree_density(child)
    return gamma


# BASE TABLE ============================================================================

class RungeKuttaTable:
    """Base class for explicit Runge-Kutta tables with dense output.

    Subclasses fill in the raw coefficients in their constructor and call
    '_build' at the end, which converts them into numpy arrays and
    polynomials. After that the table is not modified anymore.

    The dense output inside a step of size 'h' starting at 'y_0' with
    stage derivatives 'k' is

    .. math::

        y(t_0 + \\theta h) = y_0 + h \\sum_j b_j(\\theta) \\, k_j

    with the interpolant basis polynomials :math:`b_j(\\theta)` that satisfy
    :math:`b_j(1) = b_j` and :math:`b_j(0) = 0`.

    Attributes
    ----------
    s : int
        number of stages
    n : int
        order of the propagating scheme
    m : int
        order of the embedded scheme, '0' if there is no error estimate
    order_interpolant : int
        order of the dense output
    BT : dict[int, list[float]]
        strictly lower triangular stage coupling rows, keyed by stage index
    eval_stages : list[float]
        stage time fractions 'c'
    b : list[float]
        weights of the final update
    b2 : list[float]
        weights of the embedded scheme
    BI : list[list[float]]
        coefficients (ascending powers of theta) of the interpolant basis
    """

    def __init__(self):

        #number of stages and orders
        self.s = 1
        self.n = 1
        self.m = 0
        self.order_interpolant = 1

        #raw coefficients
        self.BT = {}
        self.eval_stages = [0.0]
        self.b = [1.0]
        self.b2 = [0.0]
        self.BI = [[0.0, 1.0]]


    def __str__(self):
        return self.__class__.__name__


    def __repr__(self):
        return f"{self.__class__.__name__}(s={self.s}, n={self.n}, m={self.m})"


    def _build(self):
        """Convert the raw coefficients to numpy arrays and
        polynomials, has to be called by the subclass constructor.
        """

        #stage coupling matrix
        self.a = np.zeros((self.s, self.s))
        for i, row in self.BT.items():
            self.a[i, :len(row)] = row

        #weights and stage times
        self.b = np.asarray(self.b, dtype=float)
        self.b2 = np.asarray(self.b2, dtype=float)
        self.c = np.asarray(self.eval_stages, dtype=float)

        #interpolant basis and its derivatives (cached by order)
        self.bi = [Polynomial(coeffs) for coeffs in self.BI]
        self._bi_derivatives = {0: self.bi}

        #first same as last: last stage is evaluated at the new point
        self.fsal = (
            self.s > 1
            and self.c[-1] == 1.0
            and self.b[-1] == 0.0
            and np.array_equal(self.a[-1, :-1], self.b[:-1])
            )


    # dense output ----------------------------------------------------------------------

    def weights(self, theta, order=0):
        """Evaluate the interpolant basis (or its derivative
        of some order) at the step fraction 'theta'.

        Parameters
        ----------
        theta : float
            normalized time within the step in [0, 1]
        order : int
            derivative order with respect to theta

        Returns
        -------
        w : array[float]
            basis values, one per stage
        """
        if order not in self._bi_derivatives:
            self._bi_derivatives[order] = [p.deriv(order) for p in self.bi]
        return np.array([p(theta) for p in self._bi_derivatives[order]])


    def interpolate(self, y_0, k, h, theta, order=0):
        """Dense output of the solution or its derivative
        inside a step.

        Parameters
        ----------
        y_0 : array[float]
            value at the start of the step
        k : array[float]
            stage derivatives, shape (s, N)
        h : float
            step size
        theta : float
            normalized time within the step
        order : int
            derivative order with respect to time

        Returns
        -------
        y : array[float]
            interpolated value (order 0) or derivative
        """
        w = self.weights(theta, order)
        if order == 0:
            return y_0 + h * (w @ k)
        return h ** (1 - order) * (w @ k)


    def update(self, y_0, k, h):
        """Final update of the step"""
        return y_0 + h * (self.b @ k)


    def error(self, k, h):
        """Local truncation error estimate from the embedded scheme"""
        return h * ((self.b - self.b2) @ k)


    # validation ------------------------------------------------------------------------

    def continuity_error(self):
        """Max deviation of the interpolant from the step endpoints,
        'bi(1) == b' and 'bi(0) == 0'.
        """
        w_1 = self.weights(1.0)
        w_0 = self.weights(0.0)
        return max(np.max(np.abs(w_1 - self.b)), np.max(np.abs(w_0)))


    def consistency_error(self):
        """Max deviation of the stage times from the row sums of 'a'"""
        return np.max(np.abs(self.c - self.a.sum(axis=1)))


    def _elementary_weights(self, tree):
        phi = np.ones(self.s)
        for child in tree:
            phi = phi * (self.a @ self._elementary_weights(child))
        return phi


    def order_conditions_error(self):
        """Max residual of the Butcher order conditions up to
        the order of the scheme (and of the embedded scheme).

        Returns
        -------
        err : float
            max absolute residual over all rooted trees
        """
        err = 0.0
        for weights, order in ((self.b, self.n), (self.b2, self.m)):
            for q in range(1, order + 1):
                for tree in _trees(q):
                    phi = self._elementary_weights(tree)
                    residual = weights @ phi - 1.0 / _tree_density(tree)
                    err = max(err, abs(residual))
        return err

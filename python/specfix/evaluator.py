"""
Reference evaluators.

The generator never computes a special function itself; it asks a
:class:`ReferenceEvaluator` for the value. :class:`ScipyEvaluator` is the
trusted implementation backed by :mod:`scipy.special`. Argument order and
conventions follow the C++17 ``<cmath>`` special functions, since that is
what downstream test suites compare against:

- elliptic integrals take the modulus ``k`` (scipy takes ``m = k**2``)
- ``ellint_3(k, nu, phi)`` integrates ``1 / ((1 - nu sin^2) sqrt(1 - k^2 sin^2))``
- ``assoc_legendre`` carries no Condon-Shortley phase
- ``tgamma`` is ``+/-inf`` at zero and NaN at negative integers
"""

import math
import sys

import numpy as np
import scipy.special as sp

# Slack for nu * sin^2(phi) when nu was drawn right at 1/sin^2(phi).
SINGULAR_TOL = 4 * sys.float_info.epsilon


class DomainError(ValueError):
    """Arguments fall outside the valid domain of a special function."""


class ReferenceEvaluator:
    """One method per special function.

    Subclasses implement the methods they support; :meth:`evaluate` dispatches
    by name so callers and stubs only need a single entry point.
    """

    def evaluate(self, name, *args):
        fn = getattr(self, name, None)
        if fn is None or name.startswith("_") or name == "evaluate":
            raise AttributeError(f"{type(self).__name__} cannot evaluate {name!r}")
        return fn(*args)

    def cyl_bessel_i(self, v, x):
        raise NotImplementedError

    def cyl_bessel_j(self, v, x):
        raise NotImplementedError

    def cyl_bessel_k(self, v, x):
        raise NotImplementedError

    def cyl_neumann(self, v, x):
        raise NotImplementedError

    def sph_bessel(self, n, x):
        raise NotImplementedError

    def sph_neumann(self, n, x):
        raise NotImplementedError

    def beta(self, x, y):
        raise NotImplementedError

    def ellint_1(self, k, phi):
        raise NotImplementedError

    def ellint_2(self, k, phi):
        raise NotImplementedError

    def ellint_3(self, k, nu, phi):
        raise NotImplementedError

    def comp_ellint_1(self, k):
        raise NotImplementedError

    def comp_ellint_2(self, k):
        raise NotImplementedError

    def comp_ellint_3(self, k, nu):
        raise NotImplementedError

    def expint(self, x):
        raise NotImplementedError

    def hermite(self, n, x):
        raise NotImplementedError

    def laguerre(self, n, x):
        raise NotImplementedError

    def assoc_laguerre(self, n, m, x):
        raise NotImplementedError

    def legendre(self, n, x):
        raise NotImplementedError

    def assoc_legendre(self, n, m, x):
        raise NotImplementedError

    def riemann_zeta(self, x):
        raise NotImplementedError

    def tgamma(self, x):
        raise NotImplementedError

    def lgamma(self, x):
        raise NotImplementedError


class ScipyEvaluator(ReferenceEvaluator):
    """Reference values from :mod:`scipy.special`.

    scipy reports domain problems by returning NaN; evaluation runs under
    ``scipy.special.errstate(domain="raise")`` so those surface as
    :class:`DomainError` instead.
    """

    def evaluate(self, name, *args):
        try:
            with sp.errstate(domain="raise"):
                value = super().evaluate(name, *args)
        except sp.SpecialFunctionError as e:
            raise DomainError(f"{name}{tuple(args)}: {e}") from e
        return float(value)

    # Bessel

    def cyl_bessel_i(self, v, x):
        return sp.iv(v, x)

    def cyl_bessel_j(self, v, x):
        return sp.jv(v, x)

    def cyl_bessel_k(self, v, x):
        return sp.kv(v, x)

    def cyl_neumann(self, v, x):
        return sp.yv(v, x)

    def sph_bessel(self, n, x):
        return sp.spherical_jn(n, x)

    def sph_neumann(self, n, x):
        return sp.spherical_yn(n, x)

    def beta(self, x, y):
        return sp.beta(x, y)

    # Elliptic integrals

    def ellint_1(self, k, phi):
        return sp.ellipkinc(phi, k * k)

    def ellint_2(self, k, phi):
        return sp.ellipeinc(phi, k * k)

    def ellint_3(self, k, nu, phi):
        m = k * k
        s2 = math.sin(phi) ** 2
        if nu * s2 > 1.0 + SINGULAR_TOL:
            raise DomainError(f"ellint_3: nu={nu} exceeds 1/sin^2(phi) for phi={phi}")
        # Reduce to |phi| <= pi/2; each half period adds twice the complete integral.
        j = round(phi / math.pi)
        if nu * s2 >= 1.0:
            # the integrand blows up at the upper limit
            return math.copysign(math.inf, phi - j * math.pi)
        value = self._pi_incomplete(m, nu, phi - j * math.pi)
        if j:
            value += 2 * j * self._pi_complete(m, nu)
        return value

    def comp_ellint_1(self, k):
        return sp.ellipk(k * k)

    def comp_ellint_2(self, k):
        return sp.ellipe(k * k)

    def comp_ellint_3(self, k, nu):
        return self._pi_complete(k * k, nu)

    def _pi_incomplete(self, m, nu, phi):
        s = math.sin(phi)
        c2 = math.cos(phi) ** 2
        s2 = s * s
        y = 1.0 - m * s2
        rf = sp.elliprf(c2, y, 1.0)
        rj = sp.elliprj(c2, y, 1.0, 1.0 - nu * s2)
        return s * rf + nu / 3.0 * s * s2 * rj

    def _pi_complete(self, m, nu):
        if nu == 1.0:
            return math.inf
        if nu > 1.0:
            # Cauchy principal value
            return float(sp.ellipk(m)) - self._pi_complete(m, m / nu)
        rf = sp.elliprf(0.0, 1.0 - m, 1.0)
        rj = sp.elliprj(0.0, 1.0 - m, 1.0, 1.0 - nu)
        return rf + nu / 3.0 * rj

    # Exponential integral, zeta, gamma

    def expint(self, x):
        return sp.expi(x)

    def riemann_zeta(self, x):
        return sp.zeta(x)

    def tgamma(self, x):
        if x <= 0 and x == math.floor(x):
            return math.copysign(math.inf, x) if x == 0 else math.nan
        return sp.gamma(x)

    def lgamma(self, x):
        if x <= 0 and x == math.floor(x):
            return math.inf
        return sp.gammaln(x)

    # Orthogonal polynomials

    def hermite(self, n, x):
        return sp.eval_hermite(n, x)

    def laguerre(self, n, x):
        return sp.eval_laguerre(n, x)

    def assoc_laguerre(self, n, m, x):
        return sp.eval_genlaguerre(n, m, x)

    def legendre(self, n, x):
        return sp.eval_legendre(n, x)

    def assoc_legendre(self, n, m, x):
        if m > n:
            return 0.0
        # scipy includes the Condon-Shortley phase (-1)**m
        p = sp.assoc_legendre_p(n, m, x)
        return (-1) ** m * float(np.ravel(p)[0])

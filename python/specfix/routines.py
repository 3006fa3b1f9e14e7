"""
Sample-and-evaluate routines, one per special function family.

Each routine draws its arguments from the ranges of a :class:`Profile`,
asks the evaluator for the reference value and appends the records to the
sink. A :class:`DomainError` from the evaluator is not caught.
"""

import math


def emit(sink, evaluator, name, *args):
    result = evaluator.evaluate(name, *args)
    return sink.append(name, *args, result)


def bessels(sink, evaluator, sampler, profile):
    v = sampler.uniform(*profile.bessel_order)
    x = sampler.uniform(*profile.bessel_arg)
    n = sampler.integer(*profile.bessel_index)

    # I and J need an integer order on the negative axis
    vi = float(math.floor(v)) if x < 0 else v
    ax = abs(x)

    emit(sink, evaluator, "cyl_bessel_i", vi, x)
    emit(sink, evaluator, "cyl_bessel_j", vi, x)
    emit(sink, evaluator, "cyl_bessel_k", v, ax)
    emit(sink, evaluator, "cyl_neumann", v, ax)
    emit(sink, evaluator, "sph_bessel", n, ax)
    emit(sink, evaluator, "sph_neumann", n, ax)


def betas(sink, evaluator, sampler, profile):
    x = sampler.uniform(*profile.beta)
    y = sampler.uniform(*profile.beta)

    emit(sink, evaluator, "beta", x, y)


def characteristic_bound(phi, profile):
    """Largest characteristic ``nu`` that keeps ``1 - nu sin^2(phi)`` positive."""
    s2 = math.sin(phi) ** 2
    cap = profile.ellint_char_cap
    if s2 == 0.0:
        return cap if cap is not None else -profile.ellint_char_lo
    bound = 1.0 / s2
    return bound if cap is None else min(bound, cap)


def ellints(sink, evaluator, sampler, profile):
    k = sampler.uniform(-1, 1)
    while abs(k) >= 1:
        k = sampler.uniform(-1, 1)
    phi = sampler.uniform(*profile.ellint_phi)
    nu = sampler.uniform(profile.ellint_char_lo, characteristic_bound(phi, profile))
    nu_c = sampler.uniform(profile.ellint_char_lo, 1)

    emit(sink, evaluator, "ellint_1", k, phi)
    emit(sink, evaluator, "ellint_2", k, phi)
    emit(sink, evaluator, "ellint_3", k, nu, phi)
    emit(sink, evaluator, "comp_ellint_1", k)
    emit(sink, evaluator, "comp_ellint_2", k)
    emit(sink, evaluator, "comp_ellint_3", k, nu_c)


def expints(sink, evaluator, sampler, profile):
    x = sampler.uniform(*profile.expint)

    emit(sink, evaluator, "expint", x)


def hermites(sink, evaluator, sampler, profile):
    n = sampler.integer(*profile.hermite_degree)
    x = sampler.uniform(*profile.hermite_arg)

    emit(sink, evaluator, "hermite", n, x)


def laguerres(sink, evaluator, sampler, profile):
    n = sampler.integer(*profile.laguerre_degree)
    m = sampler.integer(*profile.laguerre_degree)
    x = sampler.uniform(*profile.laguerre_arg)

    emit(sink, evaluator, "laguerre", n, x)
    emit(sink, evaluator, "assoc_laguerre", n, m, x)


def legendres(sink, evaluator, sampler, profile):
    n = sampler.integer(*profile.legendre_degree)
    m = sampler.integer(*profile.legendre_degree)
    x = sampler.uniform(*profile.legendre_arg)

    emit(sink, evaluator, "legendre", n, x)
    emit(sink, evaluator, "assoc_legendre", n, m, x)


def zetas(sink, evaluator, sampler, profile):
    x = sampler.uniform(*profile.zeta)

    emit(sink, evaluator, "riemann_zeta", x)


def gammas(sink, evaluator, sampler, profile):
    x = sampler.uniform(*profile.gamma)
    # land on the poles now and then
    if sampler.chance(profile.gamma_pole_chance):
        x = float(math.floor(x))

    emit(sink, evaluator, "tgamma", x)
    emit(sink, evaluator, "lgamma", x)


# Declared order; the driver runs them in this order.
ROUTINES = {
    "bessels": bessels,
    "betas": betas,
    "ellints": ellints,
    "expints": expints,
    "hermites": hermites,
    "laguerres": laguerres,
    "legendres": legendres,
    "zetas": zetas,
    "gammas": gammas,
}

# Record names each routine produces, in emission order.
PRODUCES = {
    "bessels": (
        "cyl_bessel_i",
        "cyl_bessel_j",
        "cyl_bessel_k",
        "cyl_neumann",
        "sph_bessel",
        "sph_neumann",
    ),
    "betas": ("beta",),
    "ellints": (
        "ellint_1",
        "ellint_2",
        "ellint_3",
        "comp_ellint_1",
        "comp_ellint_2",
        "comp_ellint_3",
    ),
    "expints": ("expint",),
    "hermites": ("hermite",),
    "laguerres": ("laguerre", "assoc_laguerre"),
    "legendres": ("legendre", "assoc_legendre"),
    "zetas": ("riemann_zeta",),
    "gammas": ("tgamma", "lgamma"),
}


def select(names=None):
    """Routines to run, in declared order, optionally restricted to ``names``."""
    if not names:
        return list(ROUTINES.items())
    unknown = sorted(set(names) - set(ROUTINES))
    if unknown:
        raise ValueError(
            f"unknown routine(s) {', '.join(unknown)}, "
            f"expected some of {', '.join(ROUTINES)}"
        )
    return [(name, fn) for name, fn in ROUTINES.items() if name in names]

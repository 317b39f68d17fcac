"""
Engineering-economics factor library.

Closed-form time-value-of-money factors (single payment, uniform series,
arithmetic/geometric gradient; discrete and continuous compounding) plus
a notation registry, identity diagnostics and validated request models.
"""

"""
Color Delta E Calculation Module

CIE76 (Euclidean) color difference in L*a*b* space.

CIEDE2000 is deliberately not used: the inspection tolerance is a fixed,
small Delta E (2.0) where the CIE76 approximation is accepted practice.
"""

from typing import Sequence, Tuple, Union

import numpy as np

LabLike = Union[Tuple[float, float, float], Sequence[float], np.ndarray]


def _unpack(lab: LabLike) -> Tuple[float, float, float]:
    if isinstance(lab, (tuple, list)):
        L, a, b = lab
    else:
        L, a, b = lab[0], lab[1], lab[2]
    return float(L), float(a), float(b)


def delta_e_cie1976(lab1: LabLike, lab2: LabLike) -> float:
    """
    CIE76 color difference (Delta E*ab).

    Args:
        lab1: first color (L*, a*, b*)
        lab2: second color (L*, a*, b*)

    Returns:
        Euclidean distance in Lab space

    Examples:
        >>> delta_e_cie1976((50, 2.5, -10), (55, 3.5, -9))
        5.196...
    """
    L1, a1, b1 = _unpack(lab1)
    L2, a2, b2 = _unpack(lab2)

    delta_E = np.sqrt((L2 - L1) ** 2 + (a2 - a1) ** 2 + (b2 - b1) ** 2)

    return float(delta_E)


def describe_color_shift(dL: float, da: float, db: float) -> str:
    """
    Describe a Lab shift in operator terms (two largest components).

    Args:
        dL: test - standard (L*)
        da: test - standard (a*)
        db: test - standard (b*)

    Returns:
        e.g. "darker (dL=-3.1), more yellow (db=+2.4)"
    """
    abs_vals = [(abs(dL), "L", dL), (abs(da), "a", da), (abs(db), "b", db)]
    abs_vals.sort(reverse=True)

    descriptions = []
    for mag, axis, val in abs_vals[:2]:
        if mag < 1.0:  # below perceptibility
            continue

        if axis == "L":
            descriptions.append(f"{'darker' if val < 0 else 'lighter'} (dL={val:+.1f})")
        elif axis == "a":
            descriptions.append(f"{'more green' if val < 0 else 'more red'} (da={val:+.1f})")
        elif axis == "b":
            descriptions.append(f"{'more blue' if val < 0 else 'more yellow'} (db={val:+.1f})")

    return ", ".join(descriptions) if descriptions else "no significant shift"

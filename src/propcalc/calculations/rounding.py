# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

import math


def round_to(value: float, places: int = 2) -> float:
    """Round half up, i.e., towards positive infinity on ties.

    The built-in `round` rounds ties to even, so 0.125 would become 0.12
    rather than 0.13.
    """
    factor = 10**places

    return math.floor(value * factor + 0.5) / factor

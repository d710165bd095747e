# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file intends to provide (1) a simple replacement for raw `assert`s and (2) functions for commonly used constraints.
"""

from typing import Any, Optional

CODE_MAXLEN = 2048


def valid_code(x: Any) -> bool:
    """Session-exchange codes are opaque. The identity backend decides whether
    they are well-formed, so only empty and oversized values are refused here."""
    return isinstance(x, str) and 0 < len(x) <= CODE_MAXLEN


def ensure(
    condition: Any,
    exctype: type[Exception] = ValueError,
    msg: Optional[str] = None,
) -> None:
    if not condition:
        if msg:
            msg = "Constraint violation: " + msg
        else:
            msg = "Constraint violation"

        raise exctype(msg)

# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

__version_info__ = 0, 1, 0
__version__ = ".".join(map(str, __version_info__))

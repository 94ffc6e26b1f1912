# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from . import script_info


__all__ = [
    "script_info",
]

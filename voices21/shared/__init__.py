# ------------------------------------------------------------------------------
# Purpose:       shared is a module of voices21 containing shared items.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
__all__ = [
    'SharedConstants',
]

from .sharedconstants import SharedConstants

# ------------------------------------------------------------------------------
# Name:          sharedconstants.py
# Purpose:       Constants shared across voices21.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

# must be kept up to date with setup.py:voices21version
_VOICES21_VERSION: str = '1.0.0'

class SharedConstants:
    VOICES21_VERSION: str = _VOICES21_VERSION

    # Voice colors, indexed by (voiceId - 1) % len, as music21 style.color strings.
    VOICE_COLORS: tuple[str, ...] = (
        '#8040FF',  # 1 purple
        '#00FF00',  # 2 green
        '#A52A2A',  # 3 brown
        '#FF00FF',  # 4 magenta
        '#00FFFF',  # 5 cyan
        '#FFC800',  # 6 orange
        '#FF9696',  # 7 pink
        '#008080',  # 8 blue-green
    )

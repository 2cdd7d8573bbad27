# ------------------------------------------------------------------------------
# Name:          m21/__init__.py
# Purpose:       Allows "from voices21.m21 import M21ScoreImporter" et al instead
#                of "from voices21.m21.m21importer import M21ScoreImporter".
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

from .m21exceptions import M21ImportError
from .m21importer import M21ScoreImporter
from .m21exporter import M21VoiceExporter

# ------------------------------------------------------------------------------
# Name:          entity.py
# Purpose:       ScoreEntity is anything located on a page that an edit can add,
#                remove or modify.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
import typing as t

from voices21.score import EntityKind

# (x, y) in page coordinates, y growing downwards
Point = t.Tuple[float, float]

class ScoreEntity:
    '''
    Base of every located symbol. Notes, chords and slurs are subclasses that
    know their own kind; any other symbol (stem, beam, barline, time signature,
    brace...) is a plain ScoreEntity carrying the kind it was created with.
    '''
    def __init__(
        self,
        kind: EntityKind,
        center: Point | None = None
    ) -> None:
        self._kind: EntityKind = kind
        self._center: Point | None = center

    @property
    def kind(self) -> EntityKind:
        return self._kind

    @property
    def center(self) -> Point | None:
        return self._center

    @center.setter
    def center(self, newCenter: Point | None) -> None:
        self._center = newCenter

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.kind.name} at {self.center}>'

# ------------------------------------------------------------------------------
# Name:          relations.py
# Purpose:       Relation is an edge between two score entities (e.g. the explicit
#                "same voice" annotation between two chords).  RelationGraph holds
#                all the relations of one system.
#
# Authors:       Greg Chapman <gregc@mac.com>
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------
from voices21.score import EntityKind
from voices21.score import ScoreEntity
from voices21.score import ScoreStructureError

class Relation:
    def __init__(
        self,
        kind: EntityKind,
        source: ScoreEntity,
        target: ScoreEntity
    ) -> None:
        if not kind.isRelation:
            raise ScoreStructureError(f'{kind.name} is not a relation kind')
        self.kind: EntityKind = kind
        self.source: ScoreEntity = source
        self.target: ScoreEntity = target

    def getOpposite(self, entity: ScoreEntity) -> ScoreEntity:
        if entity is self.source:
            return self.target
        if entity is self.target:
            return self.source
        raise ScoreStructureError(f'{entity} is not an end of {self}')

    def __repr__(self) -> str:
        return f'<Relation {self.kind.name} {self.source} -> {self.target}>'

class RelationGraph:
    def __init__(self) -> None:
        self._relations: list[Relation] = []
        self._byEntity: dict[ScoreEntity, list[Relation]] = {}

    def __len__(self) -> int:
        return len(self._relations)

    def addRelation(
        self,
        kind: EntityKind,
        source: ScoreEntity,
        target: ScoreEntity
    ) -> Relation:
        rel = Relation(kind, source, target)
        self._relations.append(rel)
        self._byEntity.setdefault(source, []).append(rel)
        self._byEntity.setdefault(target, []).append(rel)
        return rel

    def addSameVoice(self, chord1: ScoreEntity, chord2: ScoreEntity) -> Relation:
        return self.addRelation(EntityKind.SAME_VOICE, chord1, chord2)

    def removeRelation(self, rel: Relation) -> None:
        self._relations.remove(rel)
        for entity in (rel.source, rel.target):
            rels = self._byEntity.get(entity)
            if rels is not None and rel in rels:
                rels.remove(rel)
                if not rels:
                    del self._byEntity[entity]

    def removeEntity(self, entity: ScoreEntity) -> None:
        for rel in list(self._byEntity.get(entity, [])):
            self.removeRelation(rel)

    def getRelations(
        self,
        entity: ScoreEntity,
        kind: EntityKind | None = None
    ) -> list[Relation]:
        rels: list[Relation] = self._byEntity.get(entity, [])
        if kind is None:
            return list(rels)
        return [rel for rel in rels if rel.kind == kind]

    @staticmethod
    def getOpposite(entity: ScoreEntity, rel: Relation) -> ScoreEntity:
        return rel.getOpposite(entity)

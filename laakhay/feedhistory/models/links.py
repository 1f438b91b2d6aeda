"""Archive link and metadata result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Classification, LinkRelation


class ArchiveLink(BaseModel):
    """One outbound link produced for a rendered feed document."""

    relation: LinkRelation
    target_url: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)


class ArchiveMetadata(BaseModel):
    """Everything computed for one render.

    An empty result (``classification is None``) means the feature degraded
    and the document should be rendered without history metadata.
    """

    classification: Classification | None = None
    prev_page_number: int | None = None
    fingerprint: str | None = None
    links: tuple[ArchiveLink, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls) -> ArchiveMetadata:
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.classification is None

    def link(self, relation: LinkRelation) -> ArchiveLink | None:
        """Return the link with the given relation, if one was produced."""
        for link in self.links:
            if link.relation == relation:
                return link
        return None

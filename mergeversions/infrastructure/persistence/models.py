"""
Modeles SQLModel pour la base de donnees MergeVersions.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- media_items: Films et episodes avec leurs liens de versions

Le champ linked_alternates_json stocke la liste des versions alternatives
serialisee en JSON : [{"path": "...", "item_id": "hex32" | null}, ...]
"""

from __future__ import annotations

import json
from datetime import datetime

from sqlmodel import Field, Index, SQLModel


class MediaItemModel(SQLModel, table=True):
    """
    Modele representant un film ou un episode de la videotheque.

    L'ID est stocke sous sa forme hexadecimale (32 caracteres, sans tirets),
    la meme que celle de primary_version_id.
    """

    __tablename__ = "media_items"
    __table_args__ = (
        Index("ix_media_items_kind_virtual", "kind", "is_virtual"),
    )

    id: str = Field(primary_key=True, max_length=32)
    kind: str = Field(index=True)  # "movie", "episode", "other"
    path: str = Field(index=True)
    path_key: str = Field(default="", index=True)  # path.casefold(), pour get_by_path
    title: str = ""
    production_year: int | None = None
    series_name: str | None = None
    season_name: str | None = None
    index_number: int | None = None
    tmdb_id: str | None = Field(default=None, index=True)
    media_source_count: int = 1
    primary_version_id: str | None = Field(default=None, index=True)
    linked_alternates_json: str | None = None  # JSON: [{"path": ..., "item_id": ...}]
    video_type: str = "video_file"
    video_3d_format: str | None = None
    default_stream_width: int | None = None
    is_virtual: bool = False
    created_at: datetime | None = Field(default_factory=datetime.utcnow)
    updated_at: datetime | None = Field(default_factory=datetime.utcnow)

    @property
    def linked_alternates(self) -> list[dict]:
        """Retourne les liens deserialises."""
        if self.linked_alternates_json:
            return json.loads(self.linked_alternates_json)
        return []


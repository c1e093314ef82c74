"""
Implementation SQLModel du repository de la videotheque.

Implemente l'interface ILibraryRepository pour la persistance des films
et episodes dans la base de donnees SQLite via SQLModel.
"""

import json
from datetime import datetime
from typing import Optional
from uuid import UUID

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from mergeversions.core.entities.media_item import ItemUpdateType, MediaItem
from mergeversions.core.ports.repositories import ILibraryRepository, RepositoryError
from mergeversions.core.value_objects import (
    LibraryQuery,
    LinkedChild,
    MediaKind,
    VideoType,
)
from mergeversions.infrastructure.persistence.models import MediaItemModel


def _links_to_json(links: list[LinkedChild]) -> Optional[str]:
    """Serialise les liens en JSON, None pour une liste vide."""
    if not links:
        return None
    return json.dumps(
        [
            {"path": link.path, "item_id": link.item_id.hex if link.item_id else None}
            for link in links
        ]
    )


class SQLModelLibraryRepository(ILibraryRepository):
    """
    Repository SQLModel pour les elements de la videotheque.

    Implemente ILibraryRepository avec conversion bidirectionnelle
    entre l'entite MediaItem (domaine) et MediaItemModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MediaItemModel) -> MediaItem:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele MediaItemModel depuis la DB

        Retourne :
            L'entite MediaItem correspondante
        """
        links = [
            LinkedChild(
                path=entry["path"],
                item_id=UUID(entry["item_id"]) if entry.get("item_id") else None,
            )
            for entry in model.linked_alternates
        ]
        return MediaItem(
            id=UUID(model.id),
            kind=MediaKind(model.kind),
            path=model.path,
            title=model.title,
            production_year=model.production_year,
            series_name=model.series_name,
            season_name=model.season_name,
            index_number=model.index_number,
            tmdb_id=model.tmdb_id,
            media_source_count=model.media_source_count,
            primary_version_id=model.primary_version_id,
            linked_alternate_versions=links,
            video_type=VideoType(model.video_type),
            video_3d_format=model.video_3d_format,
            default_stream_width=model.default_stream_width,
            is_virtual=model.is_virtual,
        )

    def _apply(self, model: MediaItemModel, entity: MediaItem) -> None:
        """Copie tous les champs de l'entite dans le modele."""
        model.kind = entity.kind.value
        model.path = entity.path
        model.path_key = entity.path.casefold()
        model.title = entity.title
        model.production_year = entity.production_year
        model.series_name = entity.series_name
        model.season_name = entity.season_name
        model.index_number = entity.index_number
        model.tmdb_id = entity.tmdb_id
        model.media_source_count = entity.media_source_count
        model.primary_version_id = entity.primary_version_id
        model.linked_alternates_json = _links_to_json(entity.linked_alternate_versions)
        model.video_type = entity.video_type.value
        model.video_3d_format = entity.video_3d_format
        model.default_stream_width = entity.default_stream_width
        model.is_virtual = entity.is_virtual
        model.updated_at = datetime.utcnow()

    def _commit(self, model: MediaItemModel) -> None:
        """Valide la transaction, en convertissant les erreurs SQLAlchemy."""
        try:
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise RepositoryError(f"Echec d'ecriture de {model.path}: {e}") from e

    def query(self, query: LibraryQuery) -> list[MediaItem]:
        """Liste les elements correspondant aux filtres, dans l'ordre d'insertion."""
        statement = select(MediaItemModel).where(MediaItemModel.kind == query.kind.value)
        if query.is_virtual is not None:
            statement = statement.where(MediaItemModel.is_virtual == query.is_virtual)
        if query.has_tmdb_id is True:
            statement = statement.where(MediaItemModel.tmdb_id.isnot(None)).where(
                MediaItemModel.tmdb_id != ""
            )
        elif query.has_tmdb_id is False:
            statement = statement.where(
                (MediaItemModel.tmdb_id.is_(None)) | (MediaItemModel.tmdb_id == "")
            )
        statement = statement.order_by(MediaItemModel.created_at, MediaItemModel.path)
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, item_id: UUID) -> Optional[MediaItem]:
        """Recupere un element par son ID."""
        model = self._session.get(MediaItemModel, item_id.hex)
        if model:
            return self._to_entity(model)
        return None

    def get_by_path(self, path: str) -> Optional[MediaItem]:
        """Recupere un element par son chemin (comparaison sans casse, Unicode compris)."""
        statement = select(MediaItemModel).where(MediaItemModel.path_key == path.casefold())
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def update(self, item: MediaItem, update_type: ItemUpdateType) -> None:
        """Persiste les champs de version d'un element existant."""
        model = self._session.get(MediaItemModel, item.id.hex)
        if model is None:
            raise RepositoryError(f"Element introuvable: {item.id.hex}")

        model.primary_version_id = item.primary_version_id
        model.linked_alternates_json = _links_to_json(item.linked_alternate_versions)
        model.updated_at = datetime.utcnow()
        self._commit(model)
        logger.debug(f"Mise a jour ({update_type.value}): {item.path}")

    def save(self, item: MediaItem) -> MediaItem:
        """Sauvegarde un element (insertion ou mise a jour)."""
        model = self._session.get(MediaItemModel, item.id.hex)
        if model is None:
            model = MediaItemModel(id=item.id.hex, kind=item.kind.value, path=item.path)
        self._apply(model, item)
        self._commit(model)
        return self._to_entity(model)

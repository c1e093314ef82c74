"""
Tests pour l'entite MediaItem et l'objet valeur LinkedChild.

Verifie le role derive, l'encodage de la reference de version principale
et la comparaison des chemins de liens.
"""

from uuid import UUID

import pytest

from mergeversions.core.entities.media_item import (
    MediaItem,
    VersionRole,
    format_item_id,
)
from mergeversions.core.value_objects import LinkedChild, MediaKind, VideoType

ITEM_ID = UUID("0f8fad5b-d9cb-469f-a165-70867728950e")


class TestVersionRole:
    """Tests du role derive d'un element."""

    def test_standalone_par_defaut(self):
        item = MediaItem(id=ITEM_ID, path="/films/a.mkv")
        assert item.role == VersionRole.STANDALONE

    def test_primary_avec_liens(self):
        item = MediaItem(
            id=ITEM_ID,
            path="/films/a.mkv",
            linked_alternate_versions=[LinkedChild(path="/films/b.mkv")],
        )
        assert item.role == VersionRole.PRIMARY

    def test_alternate_avec_reference(self):
        item = MediaItem(id=ITEM_ID, path="/films/b.mkv", primary_version_id="ab" * 16)
        assert item.role == VersionRole.ALTERNATE


class TestPrimaryVersionId:
    """Tests de l'encodage de la reference vers la version principale."""

    def test_format_hexadecimal_sans_tirets(self):
        assert format_item_id(ITEM_ID) == "0f8fad5bd9cb469fa16570867728950e"

    def test_set_primary_version_id(self):
        item = MediaItem(id=UUID(int=1))
        item.set_primary_version_id(ITEM_ID)
        assert item.primary_version_id == "0f8fad5bd9cb469fa16570867728950e"
        assert item.primary_version_uuid == ITEM_ID

    def test_set_primary_version_id_none(self):
        item = MediaItem(id=UUID(int=1), primary_version_id=ITEM_ID.hex)
        item.set_primary_version_id(None)
        assert item.primary_version_id is None
        assert item.primary_version_uuid is None

    def test_chaine_vide_traitee_comme_absente(self):
        item = MediaItem(id=UUID(int=1), primary_version_id="")
        assert item.primary_version_uuid is None
        assert item.role == VersionRole.STANDALONE


class TestSourceFlags:
    """Tests des proprietes utilisees par la selection de version principale."""

    def test_fichier_2d_classique(self):
        assert MediaItem(id=ITEM_ID).is_plain_file

    def test_iso_n_est_pas_un_fichier_classique(self):
        assert not MediaItem(id=ITEM_ID, video_type=VideoType.ISO).is_plain_file

    def test_3d_n_est_pas_un_fichier_classique(self):
        assert not MediaItem(id=ITEM_ID, video_3d_format="HSBS").is_plain_file

    @pytest.mark.parametrize(
        "sources, primary_id, expected",
        [
            (2, None, True),
            (1, None, False),
            (3, "ab" * 16, False),
        ],
    )
    def test_is_designated_bundle(self, sources, primary_id, expected):
        item = MediaItem(id=ITEM_ID, media_source_count=sources, primary_version_id=primary_id)
        assert item.is_designated_bundle is expected


class TestDisplayName:
    """Tests du libelle de log."""

    def test_film(self):
        assert MediaItem(id=ITEM_ID, title="Fight Club").display_name() == "Fight Club"

    def test_episode(self):
        item = MediaItem(id=ITEM_ID, kind=MediaKind.EPISODE, title="Pilot", series_name="X")
        assert item.display_name() == "X - Pilot"


class TestLinkedChild:
    """Tests de la comparaison de chemins des liens."""

    def test_same_path_ignore_la_casse(self):
        assert LinkedChild(path="/Films/A.mkv").same_path("/films/a.MKV")

    def test_chemins_differents(self):
        assert not LinkedChild(path="/films/a.mkv").same_path("/films/b.mkv")

    def test_chemin_none(self):
        assert not LinkedChild(path="/films/a.mkv").same_path(None)

    def test_media_kind_is_video(self):
        assert MediaKind.MOVIE.is_video
        assert MediaKind.EPISODE.is_video
        assert not MediaKind.OTHER.is_video

"""Tests pour FileSystemAdapter.contains_sub_path."""

import pytest

from mergeversions.adapters.file_system import FileSystemAdapter


@pytest.fixture
def adapter() -> FileSystemAdapter:
    return FileSystemAdapter()


class TestContainsSubPath:
    """Tests de l'appartenance d'un chemin a un repertoire."""

    @pytest.mark.parametrize(
        "parent, path",
        [
            ("/media/films", "/media/films/a.mkv"),
            ("/media/films", "/media/films/sous/dossier/a.mkv"),
            ("/media/films/", "/media/films/a.mkv"),
            ("/media/films", "/media/films"),
            ("/media/./films", "/media/films/a.mkv"),
        ],
    )
    def test_contenu(self, adapter, parent, path):
        assert adapter.contains_sub_path(parent, path)

    @pytest.mark.parametrize(
        "parent, path",
        [
            ("/media/films", "/media/films2/a.mkv"),
            ("/media/films", "/media/series/a.mkv"),
            ("/media/films/sous", "/media/films/a.mkv"),
            ("/media/films", "/media/films/../series/a.mkv"),
        ],
    )
    def test_non_contenu(self, adapter, parent, path):
        assert not adapter.contains_sub_path(parent, path)

    def test_chemins_vides(self, adapter):
        assert not adapter.contains_sub_path("", "/media/a.mkv")
        assert not adapter.contains_sub_path("/media", "")

    def test_expansion_home(self, adapter, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        assert adapter.contains_sub_path("~/films", f"{tmp_path}/films/a.mkv")

"""
Tests des routes HTTP /MergeVersions.

Tests couvrant:
- Declenchement d'un passage en arriere-plan (204)
- Refus d'un second passage concurrent (409)
- Interruption via /Cancel
- Progression et bilan via /Progress
"""

import threading
import time
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from mergeversions.services.merge_versions import BatchReport
from mergeversions.web.app import create_app


@pytest.fixture
def manager() -> MagicMock:
    return MagicMock()


@pytest.fixture
def client(manager):
    """Client HTTP sur une application branchee sur un Container mocke."""
    container = MagicMock()
    container.merge_versions_manager.return_value = manager
    with TestClient(create_app(container)) as test_client:
        yield test_client


def _wait_finished(client: TestClient, timeout: float = 5.0) -> dict:
    """Interroge /Progress jusqu'a la fin du passage."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        body = client.get("/MergeVersions/Progress").json()
        if not body["running"]:
            return body
        time.sleep(0.01)
    raise AssertionError("Le passage ne s'est pas termine")


class TestProgress:
    """Tests de GET /MergeVersions/Progress."""

    def test_aucun_passage(self, client):
        response = client.get("/MergeVersions/Progress")

        assert response.status_code == 200
        assert response.json() == {"operation": None, "progress": 0, "running": False}


class TestTriggers:
    """Tests des declencheurs de passage."""

    @pytest.mark.parametrize(
        "operation, method",
        [
            ("MergeMovies", "merge_movies"),
            ("SplitMovies", "split_movies"),
            ("MergeEpisodes", "merge_episodes"),
            ("SplitEpisodes", "split_episodes"),
        ],
    )
    def test_lance_le_passage(self, client, manager, operation, method):
        def _run(progress, should_stop):
            progress(50)
            progress(100)
            return BatchReport(total=2, processed=2)

        getattr(manager, method).side_effect = _run

        response = client.post(f"/MergeVersions/{operation}")

        assert response.status_code == 204
        body = _wait_finished(client)
        assert body["operation"] == operation
        assert body["progress"] == 100
        assert body["processed"] == 2
        assert body["error"] is None

    def test_passage_concurrent_refuse(self, client, manager):
        release = threading.Event()

        def _run(progress, should_stop):
            release.wait(5)
            return BatchReport()

        manager.merge_movies.side_effect = _run

        assert client.post("/MergeVersions/MergeMovies").status_code == 204
        response = client.post("/MergeVersions/SplitMovies")
        release.set()

        assert response.status_code == 409
        manager.split_movies.assert_not_called()
        _wait_finished(client)

    def test_nouveau_passage_apres_la_fin(self, client, manager):
        manager.merge_movies.return_value = BatchReport()
        manager.split_movies.return_value = BatchReport()

        client.post("/MergeVersions/MergeMovies")
        _wait_finished(client)

        assert client.post("/MergeVersions/SplitMovies").status_code == 204
        assert _wait_finished(client)["operation"] == "SplitMovies"

    def test_erreur_rapportee(self, client, manager):
        manager.merge_episodes.side_effect = RuntimeError("base indisponible")

        client.post("/MergeVersions/MergeEpisodes")
        body = _wait_finished(client)

        assert body["error"] == "base indisponible"


class TestCancel:
    """Tests de POST /MergeVersions/Cancel."""

    def test_interrompt_le_passage(self, client, manager):
        started = threading.Event()

        def _run(progress, should_stop):
            started.set()
            deadline = time.monotonic() + 5
            while not should_stop() and time.monotonic() < deadline:
                time.sleep(0.01)
            progress(100)
            return BatchReport(total=3, processed=1, cancelled=True)

        manager.split_episodes.side_effect = _run

        client.post("/MergeVersions/SplitEpisodes")
        assert started.wait(5)
        response = client.post("/MergeVersions/Cancel")
        body = _wait_finished(client)

        assert response.status_code == 204
        assert body["cancelled"] is True
        assert body["processed"] == 1

    def test_sans_passage_en_cours(self, client):
        assert client.post("/MergeVersions/Cancel").status_code == 204

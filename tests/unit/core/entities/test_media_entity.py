"""
Tests pour l'entite Media et sa machine a etats d'encodage.
"""

from uuid import uuid4

from videocatalog.core.entities import Media
from videocatalog.core.value_objects import MediaStatus


class TestMediaCreation:
    """Tests pour la creation d'un Media."""

    def test_new_media_is_pending(self):
        """Un media neuf est PENDING, sans chemin encode."""
        media = Media("/raw/inception.mkv")
        assert media.file_path == "/raw/inception.mkv"
        assert media.status == MediaStatus.PENDING
        assert media.encoded_path is None

    def test_each_media_has_own_id(self):
        assert Media("/raw/a.mkv").id != Media("/raw/a.mkv").id


class TestMediaTransitions:
    """Tests pour les transitions (toutes inconditionnelles)."""

    def test_send_to_encode(self):
        media = Media("/raw/a.mkv")
        media.send_to_encode()
        assert media.status == MediaStatus.PROCESSING

    def test_mark_encoded(self):
        media = Media("/raw/a.mkv")
        media.send_to_encode()
        media.mark_encoded("/enc/a.mp4")
        assert media.status == MediaStatus.COMPLETED
        assert media.encoded_path == "/enc/a.mp4"

    def test_mark_encoded_from_pending(self):
        """COMPLETED est atteignable sans passer par PROCESSING."""
        media = Media("/raw/a.mkv")
        media.mark_encoded("/enc/a.mp4")
        assert media.status == MediaStatus.COMPLETED

    def test_send_to_encode_after_completed(self):
        """Un media deja encode peut repasser en PROCESSING, chemin encode conserve."""
        media = Media("/raw/a.mkv")
        media.mark_encoded("/enc/a.mp4")
        media.send_to_encode()
        assert media.status == MediaStatus.PROCESSING
        assert media.encoded_path == "/enc/a.mp4"

    def test_mark_encoded_overwrites_path(self):
        media = Media("/raw/a.mkv")
        media.mark_encoded("/enc/v1.mp4")
        media.mark_encoded("/enc/v2.mp4")
        assert media.encoded_path == "/enc/v2.mp4"


class TestMediaRestore:
    """Tests pour la reconstruction depuis la persistance."""

    def test_restore_keeps_state(self):
        media_id = uuid4()
        media = Media.restore(
            id=media_id,
            file_path="/raw/a.mkv",
            encoded_path=None,
            status=MediaStatus.ERROR,
        )
        assert media.id == media_id
        assert media.file_path == "/raw/a.mkv"
        assert media.encoded_path is None
        assert media.status == MediaStatus.ERROR

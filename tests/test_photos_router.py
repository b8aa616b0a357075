"""
Tests for photos router and photo registration.
"""

from uuid import uuid4

import pytest
from fastapi import status

from app.models import Photo, PhotoAssignment
from app.services.photo_service import register_photos, scan_photo_directory


@pytest.fixture
def make_photo(db_session):
    """Factory for photos."""

    def _make_photo(file_name):
        photo = Photo(
            file_name=file_name,
            original_name=file_name,
            file_path=f"/photos/{file_name}",
            file_size=1024,
            mime_type="image/jpeg",
        )
        db_session.add(photo)
        db_session.flush()
        return photo

    return _make_photo


def tag(db_session, photo, guest):
    db_session.add(PhotoAssignment(photo_id=photo.id, guest_id=guest.id))
    db_session.flush()


class TestListPhotos:
    """Tests for GET /photos endpoint."""

    def test_list_with_assignments(self, test_client, db_session, make_photo, make_guest):
        second = make_photo("b.jpg")
        make_photo("a.jpg")
        tag(db_session, second, make_guest("Anna"))

        response = test_client.get("/photos")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [p["file_name"] for p in data] == ["a.jpg", "b.jpg"]
        assert data[0]["guest_assignments"] == []
        assert data[1]["guest_assignments"][0]["guest"]["first_name"] == "Anna"

    def test_hide_assigned(self, test_client, db_session, make_photo, make_guest):
        tagged = make_photo("tagged.jpg")
        make_photo("untagged.jpg")
        tag(db_session, tagged, make_guest("Anna"))

        data = test_client.get("/photos?hide_assigned=true").json()

        assert [p["file_name"] for p in data] == ["untagged.jpg"]


class TestSetPhotoGuests:
    """Tests for PUT /photos/{id}/guests endpoint."""

    def test_replaces_existing_assignments(self, test_client, db_session, make_photo, make_guest):
        photo = make_photo("group.jpg")
        anna = make_guest("Anna")
        ben = make_guest("Ben")
        cara = make_guest("Cara")
        tag(db_session, photo, anna)

        response = test_client.put(
            f"/photos/{photo.id}/guests",
            json={"guest_ids": [str(ben.id), str(cara.id)]},
        )

        assert response.status_code == status.HTTP_200_OK
        tagged = {a["guest"]["first_name"] for a in response.json()["guest_assignments"]}
        assert tagged == {"Ben", "Cara"}
        assert db_session.query(PhotoAssignment).count() == 2

    def test_duplicates_are_ignored(self, test_client, db_session, make_photo, make_guest):
        photo = make_photo("solo.jpg")
        anna = make_guest("Anna")

        response = test_client.put(
            f"/photos/{photo.id}/guests",
            json={"guest_ids": [str(anna.id), str(anna.id)]},
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()["guest_assignments"]) == 1

    def test_empty_list_clears_tags(self, test_client, db_session, make_photo, make_guest):
        photo = make_photo("group.jpg")
        tag(db_session, photo, make_guest("Anna"))

        response = test_client.put(f"/photos/{photo.id}/guests", json={"guest_ids": []})

        assert response.json()["guest_assignments"] == []
        assert db_session.query(PhotoAssignment).count() == 0

    def test_unknown_guest_leaves_tags_untouched(self, test_client, db_session, make_photo, make_guest):
        photo = make_photo("group.jpg")
        tag(db_session, photo, make_guest("Anna"))

        response = test_client.put(f"/photos/{photo.id}/guests", json={"guest_ids": [str(uuid4())]})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(PhotoAssignment).count() == 1

    def test_unknown_photo_returns_404(self, test_client):
        response = test_client.put(f"/photos/{uuid4()}/guests", json={"guest_ids": []})
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestRemovePhotoGuest:
    """Tests for DELETE /photos/{id}/guests/{guest_id} endpoint."""

    def test_remove(self, test_client, db_session, make_photo, make_guest):
        photo = make_photo("group.jpg")
        anna = make_guest("Anna")
        ben = make_guest("Ben")
        tag(db_session, photo, anna)
        tag(db_session, photo, ben)

        response = test_client.delete(f"/photos/{photo.id}/guests/{anna.id}")

        assert response.status_code == status.HTTP_200_OK
        assert [a["guest"]["first_name"] for a in response.json()["guest_assignments"]] == ["Ben"]

    def test_not_tagged_returns_404(self, test_client, make_photo, make_guest):
        photo = make_photo("group.jpg")
        anna = make_guest("Anna")

        response = test_client.delete(f"/photos/{photo.id}/guests/{anna.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestRegisterPhotos:
    """Tests for scanning and registering photos on disk."""

    def test_scan_skips_hidden_and_non_images(self, tmp_path):
        (tmp_path / "b.JPG").write_bytes(b"1234")
        (tmp_path / "a.png").write_bytes(b"12")
        (tmp_path / ".hidden.jpg").write_bytes(b"1")
        (tmp_path / "notes.txt").write_text("not a photo")
        (tmp_path / "nested").mkdir()

        found = scan_photo_directory(tmp_path)

        assert [(p.file_name, p.file_size, p.mime_type) for p in found] == [
            ("a.png", 2, "image/png"),
            ("b.JPG", 4, "image/jpeg"),
        ]
        assert found[0].url_path == "/photos/a.png"

    def test_scan_missing_directory(self, tmp_path):
        assert scan_photo_directory(tmp_path / "missing") == []

    def test_register_only_new_files(self, db_session, make_photo, tmp_path):
        make_photo("old.jpg")
        (tmp_path / "old.jpg").write_bytes(b"1")
        (tmp_path / "new.webp").write_bytes(b"123")

        created = register_photos(db_session, tmp_path)

        assert created == 1
        new_photo = db_session.query(Photo).filter(Photo.file_name == "new.webp").one()
        assert new_photo.file_path == "/photos/new.webp"
        assert new_photo.mime_type == "image/webp"
        assert db_session.query(Photo).count() == 2

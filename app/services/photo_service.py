"""
Photo assignment service.

Tags photos with the guests that appear in them.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from uuid import UUID

from sqlalchemy.orm import Session, selectinload

from app.models import Guest, Photo, PhotoAssignment

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".heic": "image/heic",
}

# URL prefix the front end serves the photos directory under
PHOTO_URL_PREFIX = "/photos"


@dataclass
class PhotoFile:
    """An image found on disk, not yet registered."""
    file_name: str
    file_size: int
    mime_type: str

    @property
    def url_path(self) -> str:
        return f"{PHOTO_URL_PREFIX}/{self.file_name}"


class PhotoServiceError(Exception):
    """Base exception for photo service errors."""
    pass


class PhotoNotFoundError(PhotoServiceError):
    """Raised when a photo is not found."""
    pass


class PhotoGuestNotFoundError(PhotoServiceError):
    """Raised when an assigned guest does not exist."""
    pass


class AssignmentNotFoundError(PhotoServiceError):
    """Raised when removing an assignment that does not exist."""
    pass


def list_photos(db: Session, hide_assigned: bool = False) -> list[Photo]:
    """Photos ordered by file name; hide_assigned drops any photo already tagged."""
    query = db.query(Photo).options(
        selectinload(Photo.guest_assignments).selectinload(PhotoAssignment.guest)
    )
    if hide_assigned:
        query = query.filter(~Photo.guest_assignments.any())
    return query.order_by(Photo.file_name).all()


def get_photo(db: Session, photo_id: UUID) -> Photo:
    photo = db.query(Photo).filter(Photo.id == photo_id).first()
    if not photo:
        raise PhotoNotFoundError(f"Photo not found: {photo_id}")
    return photo


def assign_guests(db: Session, photo_id: UUID, guest_ids: list[UUID]) -> Photo:
    """
    Replace the set of guests tagged in a photo.

    Args:
        db: Database session
        photo_id: Photo to update
        guest_ids: Guests that appear in the photo; duplicates are ignored

    Raises:
        PhotoNotFoundError: Unknown photo
        PhotoGuestNotFoundError: Any guest id does not exist
    """
    photo = get_photo(db, photo_id)

    unique_ids = list(dict.fromkeys(guest_ids))
    if unique_ids:
        found = {
            row.id for row in db.query(Guest.id).filter(Guest.id.in_(unique_ids)).all()
        }
        missing = [guest_id for guest_id in unique_ids if guest_id not in found]
        if missing:
            raise PhotoGuestNotFoundError(f"Guests not found: {', '.join(str(m) for m in missing)}")

    db.query(PhotoAssignment).filter(PhotoAssignment.photo_id == photo.id).delete(
        synchronize_session=False
    )
    db.add_all(PhotoAssignment(photo_id=photo.id, guest_id=guest_id) for guest_id in unique_ids)
    db.commit()
    db.expire(photo)

    logger.info(f"Photo {photo.file_name!r} now tagged with {len(unique_ids)} guests")
    return photo


def remove_guest_assignment(db: Session, photo_id: UUID, guest_id: UUID) -> Photo:
    """
    Untag one guest from a photo.

    Raises:
        PhotoNotFoundError: Unknown photo
        AssignmentNotFoundError: The guest is not tagged in the photo
    """
    photo = get_photo(db, photo_id)
    assignment = db.query(PhotoAssignment).filter(
        PhotoAssignment.photo_id == photo_id,
        PhotoAssignment.guest_id == guest_id,
    ).first()
    if not assignment:
        raise AssignmentNotFoundError(f"Guest {guest_id} is not assigned to photo {photo_id}")

    db.delete(assignment)
    db.commit()
    db.expire(photo)
    return photo


def scan_photo_directory(directory: Path) -> list[PhotoFile]:
    """
    Find image files directly inside a directory.

    Hidden files, subdirectories and non-image extensions are skipped.
    A missing directory yields an empty list.
    """
    if not directory.is_dir():
        logger.error(f"Photos directory not found: {directory}")
        return []

    photos = []
    for path in sorted(directory.iterdir()):
        if path.name.startswith(".") or not path.is_file():
            continue
        mime_type = MIME_TYPES.get(path.suffix.lower())
        if mime_type is None:
            continue
        photos.append(PhotoFile(file_name=path.name, file_size=path.stat().st_size, mime_type=mime_type))
    return photos


def register_photos(db: Session, directory: Path) -> int:
    """
    Create Photo rows for images in ``directory`` that are not registered yet.

    Returns:
        Number of photos created
    """
    existing = {row.file_name for row in db.query(Photo.file_name).all()}
    created = 0
    for photo_file in scan_photo_directory(directory):
        if photo_file.file_name in existing:
            continue
        db.add(Photo(
            file_name=photo_file.file_name,
            original_name=photo_file.file_name,
            file_path=photo_file.url_path,
            file_size=photo_file.file_size,
            mime_type=photo_file.mime_type,
        ))
        created += 1

    db.commit()
    logger.info(f"Registered {created} new photos from {directory}")
    return created

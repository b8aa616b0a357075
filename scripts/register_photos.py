#!/usr/bin/env python3
"""
Register photos that already sit in the front end's public photos directory.

Only creates rows for file names that are not registered yet, so it is safe
to run again after copying in more photos.

Usage:
    python scripts/register_photos.py [PHOTOS_DIR]

PHOTOS_DIR defaults to ./public/photos.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_PHOTOS_DIR = Path("public") / "photos"


def main(argv: list[str]) -> int:
    from app.database import SessionLocal
    from app.services.photo_service import register_photos

    photos_dir = Path(argv[1]) if len(argv) > 1 else DEFAULT_PHOTOS_DIR
    if not photos_dir.is_dir():
        print(f"ERROR: photos directory not found: {photos_dir}")
        return 1

    db = SessionLocal()
    try:
        created = register_photos(db, photos_dir)
    finally:
        db.close()

    print(f"Registered {created} new photos from {photos_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

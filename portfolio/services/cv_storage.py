# portfolio/services/cv_storage.py
import os
import random
import time
import logging
from datetime import datetime

from flask import current_app

from portfolio.extensions import db
from portfolio.models import CV, CURRENT_SLOT
from portfolio.errors import NotFound, PayloadTooLarge, UnsupportedMediaType, ValidationError

logger = logging.getLogger(__name__)

MAX_CV_SIZE = 10 * 1024 * 1024  # 10MB

ALLOWED_CV_TYPES = {
    ".pdf": {"application/pdf"},
    ".doc": {"application/msword"},
    ".docx": {"application/vnd.openxmlformats-officedocument.wordprocessingml.document"},
}


def upload_folder():
    folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(folder, exist_ok=True)
    return folder


def remove_file(path):
    """Delete a stored file, tolerating it already being gone."""
    try:
        os.remove(path)
        return True
    except FileNotFoundError:
        logger.warning(f"⚠️ File already missing: {path}")
        return False


def generate_cv_filename(original_name):
    extension = os.path.splitext(original_name)[1].lower()
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10 ** 9 - 1)}"
    return f"cv-{unique_suffix}{extension}"


def check_cv_file(filename, mimetype):
    extension = os.path.splitext(filename or "")[1].lower()
    allowed_mimetypes = ALLOWED_CV_TYPES.get(extension)
    if not allowed_mimetypes or (mimetype or "").lower() not in allowed_mimetypes:
        raise UnsupportedMediaType("Only PDF and Word documents are allowed")
    return extension


class CVService:
    @staticmethod
    def current():
        return CV.query.filter_by(slot=CURRENT_SLOT).first()

    @staticmethod
    def get():
        """Public metadata of the current CV, or None."""
        cv = CVService.current()
        return cv.to_dict() if cv else None

    @staticmethod
    def upload(file_storage):
        """
        Store an uploaded CV and make it the current one.

        The row is upserted on the singleton slot in a single commit; the
        replaced file is only removed once that commit has succeeded.
        """
        if file_storage is None or not file_storage.filename:
            raise ValidationError("No file uploaded")

        original_name = file_storage.filename
        check_cv_file(original_name, file_storage.mimetype)

        filename = generate_cv_filename(original_name)
        file_path = os.path.join(upload_folder(), filename)
        file_storage.save(file_path)

        size = os.path.getsize(file_path)
        if size > MAX_CV_SIZE:
            remove_file(file_path)
            raise PayloadTooLarge()

        previous_path = None
        try:
            cv = CV.query.filter_by(slot=CURRENT_SLOT).with_for_update().first()
            if cv is None:
                cv = CV(slot=CURRENT_SLOT)
                db.session.add(cv)
            else:
                previous_path = cv.path

            cv.filename = filename
            cv.original_name = original_name
            cv.path = file_path
            cv.size = size
            cv.mime_type = file_storage.mimetype
            cv.created_at = datetime.utcnow()
            db.session.commit()
        except Exception as e:
            db.session.rollback()
            remove_file(file_path)
            logger.error(f"❌ Failed to save CV record: {e}")
            raise

        if previous_path and previous_path != file_path:
            remove_file(previous_path)

        logger.info(f"✅ CV uploaded: {original_name} -> {filename} ({size} bytes)")
        return cv.to_dict()

    @staticmethod
    def delete():
        cv = CVService.current()
        if cv is None:
            raise NotFound("CV not found")

        file_path, filename = cv.path, cv.filename
        try:
            db.session.delete(cv)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        remove_file(file_path)
        logger.info(f"🗑️ CV deleted: {filename}")
        return {"message": "CV deleted successfully"}

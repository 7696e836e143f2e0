from portfolio.extensions import db
from portfolio.errors import NotFound


def list_records(model, order_by=None, limit=None, **filters):
    """Fetch every row of ``model`` matching ``filters``, newest first by default."""
    query = model.query.filter_by(**filters)
    query = query.order_by(order_by if order_by is not None else model.created_at.desc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_record_or_404(model, record_id, label):
    record = db.session.get(model, record_id)
    if record is None:
        raise NotFound(f"{label} not found")
    return record


def save_record(record):
    try:
        db.session.add(record)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return record


def delete_record(record):
    try:
        db.session.delete(record)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

from sqlalchemy.orm import Session
from formbuilder.core.config.settings import Settings
from formbuilder.models.data_type import DataType

def init_db(db: Session, settings: Settings) -> None:
    """Initialize database with required data"""
    if not settings.SEED_DEFAULT_DATA_TYPES:
        return

    # Create data types if they don't exist
    for name in settings.DEFAULT_DATA_TYPES:
        existing = db.query(DataType).filter(DataType.data_type == name).first()
        if not existing:
            db.add(DataType(data_type=name))

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

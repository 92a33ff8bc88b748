from datetime import datetime, timezone
from variant_builder.extensions import db


class StoredRecord(db.Model):
    """Serialized variant record (options, prices or availability) by key."""

    __tablename__ = "variant_records"

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    @staticmethod
    def get(key, default=None):
        row = db.session.get(StoredRecord, key)
        return row.value if row else default

    @staticmethod
    def set(key, value):
        row = db.session.get(StoredRecord, key)
        if row:
            row.value = str(value)
        else:
            row = StoredRecord(key=key, value=str(value))
            db.session.add(row)
        db.session.commit()
        return row

    def __repr__(self):
        return f"<StoredRecord {self.key}>"

"""Key-value model backing the durable translation store."""
from datetime import datetime
from app import db


class KeyValueEntry(db.Model):
    """Durable string entries: cached translations and the rate-limit timestamp."""
    __tablename__ = 'kv_entries'
    
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(2048), nullable=False, unique=True, index=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    def to_dict(self):
        """Convert entry to dictionary."""
        return {
            'key': self.key,
            'value': self.value,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, LargeBinary, String
from sqlalchemy.ext.mutable import MutableDict

from db import Base


class AccessToken(Base):
    __tablename__ = "access_tokens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(16), unique=True, index=True, nullable=False)
    is_used = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone_no = Column(String(32))
    current_qualification = Column(String(255))
    access_token = Column(String(16), index=True, nullable=False)
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)


class Response(Base):
    """Raw answers for one survey section, stored as submitted."""
    __tablename__ = "responses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    access_token = Column(String(16), index=True, nullable=False)
    section = Column(String(64), nullable=False)
    answers = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)


class StreamAssessment(Base):
    """Snapshot of the five category scores produced by a scoring run."""
    __tablename__ = "stream_assessments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    access_token = Column(String(16), index=True, nullable=False)
    variant = Column(String(16), nullable=False, default="regular")
    aptitude_scores = Column(MutableDict.as_mutable(JSON), nullable=False, default=dict)
    interest_scores = Column(MutableDict.as_mutable(JSON), nullable=False, default=dict)
    academic_performance = Column(MutableDict.as_mutable(JSON), nullable=False, default=dict)
    personality_traits = Column(MutableDict.as_mutable(JSON), nullable=False, default=dict)
    contextual_inputs = Column(MutableDict.as_mutable(JSON), nullable=False, default=dict)
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)


class Report(Base):
    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    access_token = Column(String(16), index=True, nullable=False)
    pdf_data = Column(LargeBinary, nullable=False)
    created_at = Column(DateTime(timezone=False), default=datetime.utcnow, nullable=False)

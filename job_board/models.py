from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from .db import Base


class JobORM(Base):
    __tablename__ = "jobs"
    id = Column(String(128), primary_key=True)
    title = Column(String(512), nullable=False)
    company = Column(String(256), nullable=False)
    location = Column(String(256), nullable=False)
    experience = Column(String(128), nullable=False)
    salary = Column(String(128), nullable=True)
    date_posted = Column(DateTime(timezone=True), nullable=False, index=True)
    job_type = Column(String(32), nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(JSON, nullable=False, default=list)
    responsibilities = Column(JSON, nullable=False, default=list)
    benefits = Column(JSON, nullable=True)
    contact_email = Column(String(256), nullable=True)
    contact_whatsapp = Column(String(64), nullable=True)
    company_logo = Column(Text, nullable=True)
    created_by = Column(String(256), nullable=True)


class BoardSettingsORM(Base):
    __tablename__ = "board_settings"
    # single row, id is always 1
    id = Column(Integer, primary_key=True)
    payload = Column(JSON, nullable=False, default=dict)

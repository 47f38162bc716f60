import os
from datetime import datetime
from sqlalchemy import create_engine, Column, String, Text, DateTime
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Database Setup
# Local SQLite file stands in for the browser's local storage
DB_URL = os.getenv("DATABASE_URL", "sqlite:///finance_tracker.db")


def make_engine(url: str):
    return create_engine(url, connect_args={"check_same_thread": False} if "sqlite" in url else {})


engine = make_engine(DB_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

# --- Models ---

class StorageItem(Base):
    __tablename__ = "storage_items"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)  # always text, like localStorage
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

# --- Init DB ---
def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)

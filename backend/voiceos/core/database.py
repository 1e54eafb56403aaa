from sqlmodel import SQLModel, create_engine, Session
from voiceos.core.config import DB_PATH
from voiceos.models.api_key import ApiKey  # Ensure models are imported for table creation
from voiceos.models.usage import TTSUsageLog

import logging

logger = logging.getLogger(__name__)

sqlite_url = f"sqlite:///{DB_PATH}"

connect_args = {"check_same_thread": False}
engine = create_engine(sqlite_url, connect_args=connect_args)

def create_db_and_tables(target_engine=None):
    SQLModel.metadata.create_all(target_engine or engine)
    logger.info(f"[Database] Tables ready at {sqlite_url}")

def get_session():
    with Session(engine) as session:
        yield session

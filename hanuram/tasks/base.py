"""
Celery task helpers

Workers run outside the event loop, so they get a synchronous engine.
"""
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from hanuram.config import get_settings

_sync_engine = None
_SessionLocal: Optional[sessionmaker] = None

logger = logging.getLogger(__name__)


def _get_sync_sessionmaker() -> sessionmaker:
    global _sync_engine, _SessionLocal
    if _SessionLocal is None:
        settings = get_settings()
        _sync_engine = create_engine(
            settings.database_url.replace("postgresql+asyncpg://", "postgresql://"),
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=10,
        )
        _SessionLocal = sessionmaker(bind=_sync_engine)
    return _SessionLocal


def get_task_db():
    """Synchronous session for use inside a task"""
    return _get_sync_sessionmaker()()


def record_task_result(
    task_id: str,
    task_name: str,
    status: str,
    result: Optional[Any] = None,
    error: Optional[str] = None,
    duration: float = 0,
) -> Dict[str, Any]:
    """
    Log a task outcome and return it as the task result

    Args:
        task_id: Celery task id
        task_name: short task name
        status: success / failed
        result: payload for successful runs
        error: error text for failed runs
        duration: run time in seconds
    """
    log_data = {
        "task_id": task_id,
        "task_name": task_name,
        "status": status,
        "duration": f"{duration:.2f}s",
        "timestamp": datetime.now().isoformat(),
    }

    if error:
        log_data["error"] = error
        logger.error(f"Task failed: {log_data}")
    else:
        log_data["result"] = result
        logger.info(f"Task completed: {log_data}")

    return log_data

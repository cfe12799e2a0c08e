"""
Cleanup tasks

Verify's own expiry check stays authoritative; this sweep only keeps the
token table small.
"""
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from sqlalchemy import delete

from hanuram.celery_app import celery_app
from hanuram.models.password_reset import ResetToken
from hanuram.tasks.base import get_task_db, record_task_result
from hanuram.utils.timezone import utc_now_naive

logger = logging.getLogger(__name__)


def purge_expired_reset_tokens(db, now: Optional[datetime] = None) -> int:
    """Delete every token past its expiry; returns the number removed"""
    now = now or utc_now_naive()
    result = db.execute(delete(ResetToken).where(ResetToken.expires_at < now))
    db.commit()
    return result.rowcount


@celery_app.task(
    name="hanuram.tasks.cleanup_tasks.purge_expired_reset_tokens_task",
    bind=True,
)
def purge_expired_reset_tokens_task(self) -> Dict[str, Any]:
    task_id = self.request.id
    start_time = datetime.now()

    logger.info(f"[{task_id}] Purging expired reset tokens")

    db = get_task_db()
    try:
        removed = purge_expired_reset_tokens(db)
        duration = (datetime.now() - start_time).total_seconds()

        return record_task_result(
            task_id=task_id,
            task_name="purge_expired_reset_tokens",
            status="success",
            result={"removed": removed},
            duration=duration,
        )

    except Exception as e:
        logger.error(f"[{task_id}] Reset token purge failed: {e}")
        db.rollback()
        duration = (datetime.now() - start_time).total_seconds()

        record_task_result(
            task_id=task_id,
            task_name="purge_expired_reset_tokens",
            status="failed",
            error=str(e),
            duration=duration,
        )
        raise
    finally:
        db.close()

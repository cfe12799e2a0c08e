"""
Celery application

Queues:
- cleanup: periodic data cleanup
"""
import os
from celery import Celery
from celery.schedules import crontab

from hanuram.config import get_settings

settings = get_settings()

broker_url = settings.celery_broker or settings.redis_url
backend_url = settings.celery_backend or settings.redis_url

celery_app = Celery(
    "hanuram",
    broker=broker_url,
    backend=backend_url,
    include=[
        "hanuram.tasks.cleanup_tasks",
    ]
)

celery_app.conf.update(
    result_expires=86400,
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
    timezone="UTC",
    enable_utc=True,
    task_time_limit=600,
    task_soft_time_limit=540,
    task_acks_late=True,
    worker_prefetch_multiplier=1,
    task_routes={
        "hanuram.tasks.cleanup_tasks.*": {"queue": "cleanup"},
    },
    task_reject_on_worker_lost=True,
    beat_schedule={
        "purge-expired-reset-tokens": {
            "task": "hanuram.tasks.cleanup_tasks.purge_expired_reset_tokens_task",
            "schedule": crontab(minute=f"*/{settings.reset_cleanup_interval_minutes}"),
        },
    },
)

celery_app.conf.worker_max_tasks_per_child = 1000
celery_app.conf.worker_concurrency = os.cpu_count() or 4

if __name__ == "__main__":
    celery_app.start()

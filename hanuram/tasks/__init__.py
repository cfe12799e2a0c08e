"""
Celery tasks

- cleanup_tasks: expired password reset token sweep
"""
from hanuram.celery_app import celery_app

__all__ = ["celery_app"]

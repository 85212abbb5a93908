"""Celery application configuration."""

from celery import Celery

from src.config import get_settings

settings = get_settings()

app = Celery(
    "auth_service",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["src.tasks.emails"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_acks_late=True,  # redeliver if a worker dies mid-send
    task_reject_on_worker_lost=True,
    task_time_limit=120,
    task_soft_time_limit=90,
)

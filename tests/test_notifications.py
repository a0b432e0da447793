"""Notification tasks run inline because the test settings make Celery eager."""

from storefront.celery_worker import celery_app
from storefront.services.notification_service import (
    NotificationService,
    send_order_placed_task,
    send_order_status_changed_task,
)


def test_celery_runs_eagerly_in_tests():
    assert celery_app.conf.task_always_eager is True


def test_order_placed_task():
    result = send_order_placed_task.apply(args=("user-1", "order-1"))

    assert result.get() == {"user_id": "user-1", "order_id": "order-1", "status": "sent"}


def test_status_changed_task():
    result = send_order_status_changed_task.apply(args=("user-1", "order-1", "PENDING", "CONFIRMED"))

    assert result.get()["status"] == "CONFIRMED"


def test_service_queues_without_a_broker():
    NotificationService.send_order_placed("user-1", "order-1")
    NotificationService.send_order_status_changed("user-1", "order-1", "CONFIRMED", "SHIPPED")

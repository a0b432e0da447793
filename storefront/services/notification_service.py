# storefront/services/notification_service.py
from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Queues customer notifications about orders.
    Tasks run on the Celery worker, never inside a checkout transaction.
    """

    @staticmethod
    def send_order_placed(user_id: str, order_id: str):
        send_order_placed_task.delay(user_id, order_id)

    @staticmethod
    def send_order_status_changed(user_id: str, order_id: str, old_status: str, new_status: str):
        send_order_status_changed_task.delay(user_id, order_id, old_status, new_status)


@celery_app.task(name="storefront.services.notification_service.send_order_placed_task")
def send_order_placed_task(user_id: str, order_id: str):
    """
    Would send the order confirmation email/SMS; for now it only logs.
    """
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} has been placed (cash on delivery)")
    return {"user_id": user_id, "order_id": order_id, "status": "sent"}


@celery_app.task(name="storefront.services.notification_service.send_order_status_changed_task")
def send_order_status_changed_task(user_id: str, order_id: str, old_status: str, new_status: str):
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} moved from {old_status} to {new_status}")
    return {"user_id": user_id, "order_id": order_id, "status": new_status}

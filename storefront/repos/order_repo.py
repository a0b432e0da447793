# storefront/repos/order_repo.py
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session, selectinload

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.data.models.product import ProductVariantModel
from storefront.domain.entities import NewOrder, OrderRecord
from storefront.domain.order_status import OrderStatus
from storefront.repos.base import OrderRepository


def to_record(order: OrderModel) -> OrderRecord:
    return OrderRecord(
        id=order.id,
        user_id=order.user_id,
        address_id=order.address_id,
        status=OrderStatus(order.status),
        payment_method=order.payment_method,
        payment_status=order.payment_status,
        total_amount=Decimal(order.total_amount),
        tracking_number=order.tracking_number,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


class OrderRepo(OrderRepository):
    def __init__(self, db: Session):
        self.db = db

    def create_order_with_items(self, order: NewOrder) -> str:
        model = OrderModel(
            user_id=order.user_id,
            address_id=order.address_id,
            status=OrderStatus(order.status).value,
            payment_method=order.payment_method,
            payment_status=order.payment_status,
            total_amount=order.total_amount,
            items=[
                OrderItemModel(
                    variant_id=item.variant_id,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
        )
        self.db.add(model)
        self.db.flush()
        return model.id

    def get_order(self, order_id: str) -> Optional[OrderRecord]:
        order = self.db.get(OrderModel, order_id)
        return to_record(order) if order else None

    def update_order_status(
        self,
        order_id: str,
        status: OrderStatus,
        tracking_number: Optional[str] = None,
    ) -> OrderRecord:
        order = self.db.get(OrderModel, order_id)
        order.status = OrderStatus(status).value
        if tracking_number is not None:
            order.tracking_number = tracking_number
        self.db.flush()
        return to_record(order)

    # read side, used by the order listing endpoints

    def _detail_query(self):
        return select(OrderModel).options(
            selectinload(OrderModel.items)
            .selectinload(OrderItemModel.variant)
            .selectinload(ProductVariantModel.product),
            selectinload(OrderModel.address),
            selectinload(OrderModel.user),
        )

    def get_order_detail(self, order_id: str) -> OrderModel | None:
        return self.db.execute(
            self._detail_query().where(OrderModel.id == order_id)
        ).scalar_one_or_none()

    def list_for_user(self, user_id: str, offset: int, limit: int) -> List[OrderModel]:
        return self.db.execute(
            self._detail_query()
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id)
            .offset(offset)
            .limit(limit)
        ).scalars().all()

    def count_for_user(self, user_id: str) -> int:
        return self.db.execute(
            select(func.count(OrderModel.id)).where(OrderModel.user_id == user_id)
        ).scalar_one()

    def list_all(self, status: OrderStatus | None, offset: int, limit: int) -> List[OrderModel]:
        query = self._detail_query()
        if status is not None:
            query = query.where(OrderModel.status == OrderStatus(status).value)
        return self.db.execute(
            query.order_by(OrderModel.created_at.desc(), OrderModel.id).offset(offset).limit(limit)
        ).scalars().all()

    def count_all(self, status: OrderStatus | None = None) -> int:
        query = select(func.count(OrderModel.id))
        if status is not None:
            query = query.where(OrderModel.status == OrderStatus(status).value)
        return self.db.execute(query).scalar_one()

    def total_revenue(self) -> Decimal:
        total = self.db.execute(select(func.sum(OrderModel.total_amount))).scalar_one()
        return Decimal(total) if total is not None else Decimal("0.00")

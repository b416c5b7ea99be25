from datetime import datetime

from shop_service.app.models.order import OrderStatus
from shop_service.app.schemas.member import AddressSchema
from shop_service.app.schemas.order import OrderFlatDto
from shop_service.app.services.order_query_service import group_flat_orders


def _flat(order_id, name, item_name, order_price, count):
    return OrderFlatDto(
        order_id=order_id,
        name=name,
        order_date=datetime(2024, 1, order_id),
        order_status=OrderStatus.ORDER,
        address=AddressSchema(city="Seoul", street="1", zipcode="1111"),
        item_name=item_name,
        order_price=order_price,
        count=count,
    )


class TestGroupFlatOrders:
    def test_groups_lines_under_their_order(self):
        flats = [
            _flat(1, "userA", "JPA1 BOOK", 10000, 1),
            _flat(1, "userA", "JPA2 BOOK", 20000, 2),
            _flat(2, "userB", "SPRING1 BOOK", 20000, 3),
            _flat(2, "userB", "SPRING2 BOOK", 40000, 4),
        ]

        orders = group_flat_orders(flats)

        assert [order.order_id for order in orders] == [1, 2]
        assert [order.name for order in orders] == ["userA", "userB"]
        assert [item.item_name for item in orders[0].order_items] == [
            "JPA1 BOOK",
            "JPA2 BOOK",
        ]
        assert [item.count for item in orders[1].order_items] == [3, 4]

    def test_keeps_first_seen_order_for_interleaved_rows(self):
        flats = [
            _flat(2, "userB", "SPRING1 BOOK", 20000, 3),
            _flat(1, "userA", "JPA1 BOOK", 10000, 1),
            _flat(2, "userB", "SPRING2 BOOK", 40000, 4),
        ]

        orders = group_flat_orders(flats)

        assert [order.order_id for order in orders] == [2, 1]
        assert len(orders[0].order_items) == 2
        assert len(orders[1].order_items) == 1

    def test_empty_input(self):
        assert group_flat_orders([]) == []

    def test_item_order_id_is_not_serialized(self):
        orders = group_flat_orders([_flat(1, "userA", "JPA1 BOOK", 10000, 1)])

        dumped = orders[0].model_dump(mode="json")

        assert dumped["order_id"] == 1
        assert dumped["order_items"] == [
            {"item_name": "JPA1 BOOK", "order_price": 10000, "count": 1}
        ]

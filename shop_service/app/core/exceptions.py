"""Domain exceptions raised by Shop Service entities and services."""


class IllegalStateError(Exception):
    """Operation is not allowed in the entity's current state."""


class NotEnoughStockError(Exception):
    """Requested quantity exceeds the item's remaining stock."""

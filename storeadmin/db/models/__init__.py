from storeadmin.db.database import Base

# Import models
from storeadmin.db.models.stores import Stores, Status, status_enum
from storeadmin.db.models.users import Users, Role, role_enum
from storeadmin.db.models.products import Products
from storeadmin.db.models.orders import Orders
from storeadmin.db.models.order_items import OrderItems

__all__ = [
    "Base",
    # Models
    "Stores",
    "Users",
    "Products",
    "Orders",
    "OrderItems",
    # Enums
    "Status",
    "Role",
    "status_enum",
    "role_enum",
]

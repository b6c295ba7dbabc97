from app.models.users import User
from app.models.admins import Admin
from app.models.workshops import Workshop
from app.models.products import Product
from app.models.vehicles import Vehicle
from app.models.cart import CartItem
from app.models.banners import Banner
from app.models.transactions import Transaction
from app.models.shop_orders import ShopOrder, ShopOrderItem
from app.models.towing import TowingRequest
from app.models.quotations import Quotation

__all__ = [
    "User",
    "Admin",
    "Workshop",
    "Product",
    "Vehicle",
    "CartItem",
    "Banner",
    "Transaction",
    "ShopOrder",
    "ShopOrderItem",
    "TowingRequest",
    "Quotation",
]

from demoshop.models.address import Address
from demoshop.models.blog import Author, BlogCategory, Post
from demoshop.models.brand import Brand
from demoshop.models.category import ShopCategory, category_product
from demoshop.models.comment import Comment
from demoshop.models.customer import Customer
from demoshop.models.notification import Notification
from demoshop.models.order import Order, OrderItem, Payment
from demoshop.models.product import Product
from demoshop.models.user import User

__all__ = [
    "Address",
    "Author",
    "BlogCategory",
    "Brand",
    "Comment",
    "Customer",
    "Notification",
    "Order",
    "OrderItem",
    "Payment",
    "Post",
    "Product",
    "ShopCategory",
    "User",
    "category_product",
]

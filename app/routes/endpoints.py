from fastapi import APIRouter
from app.routes.v1.router import (
    health,
    transactions,
    workshops,
    products,
    users,
    vehicles,
    cart,
    admins,
    banners,
)

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(transactions.router, prefix="/transactions", tags=["Transactions"])
api_router.include_router(workshops.router, prefix="/workshops", tags=["Workshops"])
api_router.include_router(products.router, prefix="/products", tags=["Products"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(vehicles.router, prefix="/users", tags=["Vehicles"])
api_router.include_router(cart.router, prefix="/users", tags=["Cart"])
api_router.include_router(admins.router, prefix="/admin", tags=["Admin"])
api_router.include_router(banners.router, prefix="/banners", tags=["Banners"])

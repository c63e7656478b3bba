from fastapi import APIRouter

from healthplus.api.routes import (
    appointments,
    auth,
    notifications,
    orders,
    pharmacy,
    state,
    teleconsultation,
)
from healthplus.api.routes.admin import catalog as admin_catalog
from healthplus.api.routes.admin import dashboard as admin_dashboard

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(teleconsultation.router, prefix="/teleconsultation", tags=["teleconsultation"])
api_router.include_router(pharmacy.router, prefix="/pharmacy", tags=["pharmacy"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
api_router.include_router(state.router, tags=["state"])

# Admin routes
api_router.include_router(admin_dashboard.router, prefix="/admin", tags=["admin"])
api_router.include_router(admin_catalog.router, prefix="/admin", tags=["admin-catalog"])

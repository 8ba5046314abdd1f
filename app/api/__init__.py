from fastapi import APIRouter

from app.api.home_routes import router as home_router
from app.api.config_router import router as config_router
from app.api.script_router import router as script_router
from app.api.load_testing_router import router as load_testing_router

api_router = APIRouter()
api_router.include_router(
    home_router,
    tags=["home"],
)

api_router.include_router(
    config_router,
    prefix="/config",
    tags=["Config"]
)

api_router.include_router(
    script_router,
    prefix="/scripts",
    tags=["Scripts"]
)

api_router.include_router(
    load_testing_router,
    prefix="/load-testing",
    tags=["Load Testing"]
)

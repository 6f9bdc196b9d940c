from fastapi import APIRouter

from src.tracker.api.v1 import auth, projects, teams, users, work_items

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(teams.router)
api_router.include_router(projects.router)
api_router.include_router(work_items.router)

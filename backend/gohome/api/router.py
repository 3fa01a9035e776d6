# gohome/api/router.py
from fastapi import APIRouter
from gohome.api import home

api_router = APIRouter()

api_router.include_router(home.router, tags=["homepage"])

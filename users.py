from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from typing import List

from schemas import UserCreate, UserDetail
from services import UserService, get_user_service

users_router = APIRouter()


@users_router.post("", response_model=UserDetail)
async def create_user(
    user: UserCreate, service: UserService = Depends(get_user_service)
):
    return service.create_user(user)


@users_router.get("", response_model=List[UserDetail])
async def get_all_users(service: UserService = Depends(get_user_service)):
    return service.get_all_users()


@users_router.get("/email/{email}", response_model=UserDetail)
async def get_user_by_email(
    email: str, service: UserService = Depends(get_user_service)
):
    return service.get_user_by_email(email)


@users_router.get("/{user_id}", response_model=UserDetail)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.get_user_by_id(user_id)


@users_router.delete("", response_class=PlainTextResponse)
async def delete_all_users(service: UserService = Depends(get_user_service)):
    service.delete_all_users()
    return "All users deleted successfully"

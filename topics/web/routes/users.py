"""
Routes des utilisateurs.
"""

from fastapi import APIRouter, Depends, status

from ...services import UserService
from ..deps import get_user_service
from ..schemas import RegisterUserRequest, RegisterUserResponse, UserInfoResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=RegisterUserResponse, status_code=status.HTTP_201_CREATED)
def register_user(req: RegisterUserRequest, service: UserService = Depends(get_user_service)):
    user_id = service.register_user(req.email, req.first_name, req.last_name, req.tenancy)
    return RegisterUserResponse(id=user_id)


@router.get("/{user_id}", response_model=UserInfoResponse, response_model_exclude_none=True)
def get_user_info(user_id: str, service: UserService = Depends(get_user_service)):
    return UserInfoResponse.model_validate(service.get_user_info(user_id))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> None:
    service.delete_user(user_id)

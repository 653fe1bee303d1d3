from fastapi import APIRouter, Depends, Response, status
from datetime import date
from typing import List

from schemas import ExpenseCreate, ExpenseUpdate, ExpenseView
from services import ExpenseService, get_expense_service


router = APIRouter()


@router.post(
    "/expenses", response_model=ExpenseView, status_code=status.HTTP_201_CREATED
)
async def add_expense(
    expense: ExpenseCreate,
    service: ExpenseService = Depends(get_expense_service),
):
    return service.add_expense(expense)


@router.get("/expenses/user/{user_id}", response_model=List[ExpenseView])
async def get_all_expenses(
    user_id: int,
    service: ExpenseService = Depends(get_expense_service),
):
    return service.get_all_expenses(user_id)


@router.get("/expenses/user/{user_id}/date/{expense_date}", response_model=List[ExpenseView])
async def get_expenses_by_date(
    user_id: int,
    expense_date: date,
    service: ExpenseService = Depends(get_expense_service),
):
    return service.get_expenses_by_date(user_id, expense_date)


@router.put("/expenses/{expense_id}", response_model=ExpenseView)
async def update_expense(
    expense_id: int,
    expense: ExpenseUpdate,
    service: ExpenseService = Depends(get_expense_service),
):
    return service.update_expense(expense_id, expense)


@router.delete("/expenses/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    expense_id: int,
    service: ExpenseService = Depends(get_expense_service),
):
    service.delete_expense(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

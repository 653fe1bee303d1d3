import logging
import datetime
from typing import List

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_db, User, Expense
from errors import ConflictError, NotFoundError
from schemas import UserCreate, ExpenseCreate, ExpenseUpdate
from security import hash_password

logger = logging.getLogger("finance-tracker.services")


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def create_user(self, payload: UserCreate) -> User:
        """Persist a new user, storing only the bcrypt hash of its password.

        Email uniqueness is left to the database; a duplicate surfaces as a
        ``ConflictError`` after the session is rolled back.
        """
        user = User(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
            created_at=payload.created_at,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Rejected duplicate email %s", payload.email)
            raise ConflictError(f"Email {payload.email} is already registered")
        self.db.refresh(user)
        logger.info("Created user %s", user.id)
        return user

    def get_all_users(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def get_user_by_id(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def get_user_by_email(self, email: str) -> User:
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            raise NotFoundError(f"User with email {email} not found")
        return user

    def delete_user(self, user_id: int) -> None:
        user = self.get_user_by_id(user_id)
        self.db.delete(user)
        self.db.commit()
        logger.info("Deleted user %s", user_id)

    def delete_all_users(self) -> None:
        # Children first so the bulk delete does not rely on FK cascade support
        expenses = self.db.query(Expense).delete(synchronize_session=False)
        users = self.db.query(User).delete(synchronize_session=False)
        self.db.commit()
        logger.info("Deleted %d users and %d expenses", users, expenses)


class ExpenseService:
    def __init__(self, db: Session):
        self.db = db

    def add_expense(self, payload: ExpenseCreate) -> Expense:
        if self.db.get(User, payload.user_id) is None:
            raise NotFoundError(f"User {payload.user_id} not found")

        expense = Expense(
            amount=payload.amount,
            category=payload.category,
            description=payload.description,
            date=payload.date,
            user_id=payload.user_id,
        )
        self.db.add(expense)
        self.db.commit()
        self.db.refresh(expense)
        logger.info("Added expense %s for user %s", expense.id, expense.user_id)
        return expense

    def get_all_expenses(self, user_id: int) -> List[Expense]:
        return (
            self.db.query(Expense)
            .filter(Expense.user_id == user_id)
            .order_by(Expense.id)
            .all()
        )

    def get_expenses_by_date(self, user_id: int, date: datetime.date) -> List[Expense]:
        return (
            self.db.query(Expense)
            .filter(Expense.user_id == user_id, Expense.date == date)
            .order_by(Expense.id)
            .all()
        )

    def get_expense(self, expense_id: int) -> Expense:
        expense = self.db.get(Expense, expense_id)
        if expense is None:
            raise NotFoundError(f"Expense {expense_id} not found")
        return expense

    def update_expense(self, expense_id: int, payload: ExpenseUpdate) -> Expense:
        expense = self.get_expense(expense_id)
        expense.amount = payload.amount
        expense.category = payload.category
        expense.description = payload.description
        expense.date = payload.date
        self.db.commit()
        self.db.refresh(expense)
        logger.info("Updated expense %s", expense_id)
        return expense

    def delete_expense(self, expense_id: int) -> None:
        expense = self.get_expense(expense_id)
        self.db.delete(expense)
        self.db.commit()
        logger.info("Deleted expense %s", expense_id)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_expense_service(db: Session = Depends(get_db)) -> ExpenseService:
    return ExpenseService(db)

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.store import LoyaltyStore, get_store
from app.schemas.customer import CustomerDetailOut, LoginIn, LoginOut
from app.services.customers import customer_detail, login

router = APIRouter(tags=["customers"])


@router.post("/login", response_model=LoginOut)
def login_customer(payload: LoginIn, store: LoyaltyStore = Depends(get_store)) -> LoginOut:
    return login(store, payload)


@router.get("/customer/{customer_id}", response_model=CustomerDetailOut)
def get_customer(customer_id: str, store: LoyaltyStore = Depends(get_store)) -> CustomerDetailOut:
    return customer_detail(store, customer_id)

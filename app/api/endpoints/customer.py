from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.crud import crud_customer
from app.schemas import Customer, CustomerCreate, CustomerDeleteResponse, CustomerUpdate
from app.state import AppState, get_state

router = APIRouter()


@router.post("/", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer_item(
    customer_in: CustomerCreate, state: AppState = Depends(get_state)
):
    return crud_customer.create_customer(state, customer_in)


@router.get("/", response_model=List[Customer])
def read_all_customers(state: AppState = Depends(get_state)):
    return crud_customer.get_all_customers(state)


@router.get("/{customer_id}", response_model=Customer)
def read_customer_item(customer_id: str, state: AppState = Depends(get_state)):
    db_customer = crud_customer.get_customer(state, customer_id)
    if not db_customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return db_customer


@router.put("/{customer_id}", response_model=Customer)
def update_customer_item(
    customer_id: str, customer_in: CustomerUpdate, state: AppState = Depends(get_state)
):
    db_customer = crud_customer.update_customer(state, customer_id, customer_in)
    if not db_customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return db_customer


@router.delete("/{customer_id}", response_model=CustomerDeleteResponse)
def delete_customer_item(customer_id: str, state: AppState = Depends(get_state)):
    if not crud_customer.delete_customer(state, customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    return CustomerDeleteResponse(customer_id=customer_id)

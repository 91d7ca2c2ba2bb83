import logging
from typing import List, Optional

from app.schemas import Customer, CustomerCreate, CustomerUpdate
from app.state import AppState

logger = logging.getLogger(__name__)


def create_customer(state: AppState, customer_in: CustomerCreate) -> Customer:
    customer = Customer(
        id=state.new_id(),
        name=customer_in.name,
        email=customer_in.email,
        phone=customer_in.phone,
        added_at=state.now(),
    )
    state.customers.add(customer)
    logger.info("Customer %s added", customer.id)
    return customer


def get_customer(state: AppState, customer_id: str) -> Optional[Customer]:
    return state.customers.get(customer_id)


def get_all_customers(state: AppState) -> List[Customer]:
    return state.customers.all()


def update_customer(
    state: AppState, customer_id: str, customer_in: CustomerUpdate
) -> Optional[Customer]:
    with state.lock:
        db_customer = get_customer(state, customer_id)
        if db_customer is None:
            return None
        updated = db_customer.model_copy(update=customer_in.model_dump())
        state.customers.replace(updated)
    return updated


def delete_customer(state: AppState, customer_id: str) -> Optional[Customer]:
    # distributions and responses keep pointing at the removed customer
    with state.lock:
        db_customer = get_customer(state, customer_id)
        if db_customer:
            state.customers.remove(customer_id)
    if db_customer:
        logger.info("Customer %s deleted", customer_id)
    return db_customer

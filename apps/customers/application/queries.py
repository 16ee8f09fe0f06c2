"""Read-side queries for customers."""

from shared.domain.exceptions import NotFound
from apps.customers.domain.entities import Customer


class CustomerQueries:

    def __init__(self, customer_repo):
        self.customer_repo = customer_repo

    def get_customer(self, customer_id: int) -> Customer:
        customer = self.customer_repo.get_by_id(customer_id)
        if not customer:
            raise NotFound("Customer", customer_id)
        return customer

    def list_customers(self) -> list[Customer]:
        return self.customer_repo.list_all()

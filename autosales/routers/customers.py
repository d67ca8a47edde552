"""
Customer routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from autosales.database import get_db
from autosales.repositories import customer as repository
from autosales.responses import failure_response, message
from autosales.schemas.customer import Customer as CustomerSchema, CustomerCreate, CustomerUpdate
from autosales.schemas.message import Message

router = APIRouter(
    prefix="/customers",
    tags=["customers"],
    responses={400: {"model": Message}},
)


@router.get("", response_model=List[CustomerSchema])
async def list_customers(db: AsyncSession = Depends(get_db)):
    """
    Get all customers.
    """
    outcome = await repository.list_customers(db)
    if not outcome:
        return failure_response(outcome, "Não foi possível acessar a listagem de clientes.")
    return outcome.data


@router.get("/{customer_id}", response_model=CustomerSchema)
async def get_customer(customer_id: int, db: AsyncSession = Depends(get_db)):
    """
    Get a specific customer by ID.
    """
    outcome = await repository.get_customer(db, customer_id)
    if not outcome:
        return failure_response(outcome, "Cliente não encontrado.")
    return outcome.data


@router.post("", response_model=Message)
async def create_customer(customer: CustomerCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a new customer.
    """
    outcome = await repository.create_customer(db, customer)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível cadastrar o cliente. Entre em contato com o administrador do sistema.",
        )
    return message("Cliente cadastrado com sucesso!")


@router.put("/{customer_id}", response_model=Message)
async def update_customer(
    customer_id: int,
    customer: CustomerUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Update a customer. The ID comes from the URL, every other field from the body.
    """
    outcome = await repository.update_customer(db, customer_id, customer)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível atualizar o cliente. Entre em contato com o administrador do sistema.",
        )
    return message("Cliente atualizado com sucesso!")


@router.delete("/{customer_id}", response_model=Message)
async def remove_customer(customer_id: int, db: AsyncSession = Depends(get_db)):
    """
    Delete a customer.
    """
    outcome = await repository.remove_customer(db, customer_id)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível remover o cliente. Entre em contato com o administrador do sistema.",
        )
    return message("Cliente removido com sucesso!")

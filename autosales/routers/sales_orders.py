"""
Sales order routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from autosales.database import get_db
from autosales.repositories import sales_order as repository
from autosales.responses import failure_response, message
from autosales.schemas.message import Message
from autosales.schemas.sales_order import (
    SalesOrder as SalesOrderSchema,
    SalesOrderCreate,
    SalesOrderUpdate,
)

router = APIRouter(
    prefix="/sales-orders",
    tags=["sales orders"],
    responses={400: {"model": Message}},
)


@router.get("", response_model=List[SalesOrderSchema])
async def list_sales_orders(db: AsyncSession = Depends(get_db)):
    """
    Get all sales orders.
    """
    outcome = await repository.list_sales_orders(db)
    if not outcome:
        return failure_response(outcome, "Não foi possível acessar a listagem de pedidos.")
    return outcome.data


@router.get("/{order_id}", response_model=SalesOrderSchema)
async def get_sales_order(order_id: int, db: AsyncSession = Depends(get_db)):
    """
    Get a specific sales order by ID.
    """
    outcome = await repository.get_sales_order(db, order_id)
    if not outcome:
        return failure_response(outcome, "Pedido não encontrado.")
    return outcome.data


@router.post("", response_model=Message)
async def create_sales_order(order: SalesOrderCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a new sales order.

    The referenced car and customer are not looked up first.
    """
    outcome = await repository.create_sales_order(db, order)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível cadastrar o pedido. Entre em contato com o administrador do sistema.",
        )
    return message("Pedido cadastrado com sucesso!")


@router.put("/{order_id}", response_model=Message)
async def update_sales_order(
    order_id: int,
    order: SalesOrderUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Update a sales order.
    """
    outcome = await repository.update_sales_order(db, order_id, order)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível atualizar o pedido. Entre em contato com o administrador do sistema.",
        )
    return message("Pedido atualizado com sucesso!")


@router.delete("/{order_id}", response_model=Message)
async def remove_sales_order(order_id: int, db: AsyncSession = Depends(get_db)):
    """
    Delete a sales order.
    """
    outcome = await repository.remove_sales_order(db, order_id)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível remover o pedido. Entre em contato com o administrador do sistema.",
        )
    return message("Pedido removido com sucesso!")

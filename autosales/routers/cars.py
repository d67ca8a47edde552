"""
Car routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from autosales.database import get_db
from autosales.repositories import car as repository
from autosales.responses import failure_response, message
from autosales.schemas.car import Car as CarSchema, CarCreate, CarUpdate
from autosales.schemas.message import Message

router = APIRouter(
    prefix="/cars",
    tags=["cars"],
    responses={400: {"model": Message}},
)


@router.get("", response_model=List[CarSchema])
async def list_cars(db: AsyncSession = Depends(get_db)):
    """
    Get all cars.
    """
    outcome = await repository.list_cars(db)
    if not outcome:
        return failure_response(outcome, "Não foi possível acessar a listagem de carros.")
    return outcome.data


@router.get("/{car_id}", response_model=CarSchema)
async def get_car(car_id: int, db: AsyncSession = Depends(get_db)):
    """
    Get a specific car by ID.
    """
    outcome = await repository.get_car(db, car_id)
    if not outcome:
        return failure_response(outcome, "Carro não encontrado.")
    return outcome.data


@router.post("", response_model=Message)
async def create_car(car: CarCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a new car.
    """
    outcome = await repository.create_car(db, car)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível cadastrar o carro. Entre em contato com o administrador do sistema.",
        )
    return message("Carro cadastrado com sucesso!")


@router.put("/{car_id}", response_model=Message)
async def update_car(car_id: int, car: CarUpdate, db: AsyncSession = Depends(get_db)):
    """
    Update a car.
    """
    outcome = await repository.update_car(db, car_id, car)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível atualizar o carro. Entre em contato com o administrador do sistema.",
        )
    return message("Carro atualizado com sucesso!")


@router.delete("/{car_id}", response_model=Message)
async def remove_car(car_id: int, db: AsyncSession = Depends(get_db)):
    """
    Delete a car.
    """
    outcome = await repository.remove_car(db, car_id)
    if not outcome:
        return failure_response(
            outcome,
            "Não foi possível remover o carro. Entre em contato com o administrador do sistema.",
        )
    return message("Carro removido com sucesso!")

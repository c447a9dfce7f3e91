"""
Routes des commandes.

GET /orders, GET /orders/{id} et POST /orders pour passer une commande.
Une commande refusee renvoie 422 sans préciser la règle en cause ;
une panne de la base renvoie 500.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ...core.entities.shop import Film, Order
from ...core.value_objects.placement import PlacementStatus
from ...services.ordering import OrderService
from ..deps import get_order_service
from ..schemas import OrderIn, OrderOut

router = APIRouter(prefix="/orders", tags=["orders"])

OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]


@router.get("", response_model=list[OrderOut])
def list_orders(service: OrderServiceDep):
    """Liste toutes les commandes avec leurs films."""
    return service.find_all()


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: UUID, service: OrderServiceDep):
    """Détail d'une commande, 404 si inconnue."""
    order = service.find(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Commande introuvable")
    return order


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrderOut)
def place_order(payload: OrderIn, request: Request, response: Response, service: OrderServiceDep):
    """Passe une commande."""
    candidate = Order(items=[Film(id=ref.id) for ref in payload.items])
    result = service.place_order(candidate)

    if result.status is PlacementStatus.REJECTED:
        raise HTTPException(status_code=422, detail="Commande refusée")
    if result.status is PlacementStatus.INFRASTRUCTURE_FAILURE:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Erreur interne"
        )

    response.headers["Location"] = str(request.url_for("get_order", order_id=result.order.id))
    return result.order

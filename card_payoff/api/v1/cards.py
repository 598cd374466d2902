"""POST /v1/cards - summary across several credit cards"""

import time
from fastapi import APIRouter, Depends, Request

from card_payoff.api.v1.schemas import CardsRequest, CardsResponse
from card_payoff.api.v1.presenters import present_cards
from card_payoff.api.v1.errors import domain_error, unexpected_error
from card_payoff.api.dependencies import get_request_id, get_settings
from card_payoff.config import Settings
from card_payoff.domain.aggregate import compute_aggregate
from card_payoff.domain.exceptions import DomainException
from card_payoff.domain.models import CardEntry
from card_payoff.infrastructure.observability.metrics import record_calculation
from card_payoff.infrastructure.observability.logging import log_calculation

router = APIRouter()

DEFAULT_CARD_NAME = "Kart"


@router.post("/cards", response_model=CardsResponse)
def summarize_cards(
    body: CardsRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Total debt, debt-weighted rate and one month's interest across cards.

    Rows without a positive debt are ignored; 422 if none are left.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    entries = [
        CardEntry(
            name=card.name.strip() or DEFAULT_CARD_NAME,
            debt=card.debt,
            rate=card.rate_percent / 100,
        )
        for card in body.cards
    ]

    try:
        result = compute_aggregate(entries)
    except DomainException as e:
        raise domain_error("cards", request_id, e)
    except Exception as e:
        raise unexpected_error("cards", request_id, e)

    record_calculation("cards", "ok")
    log_calculation(request_id, "cards", "ok", None, (time.time() - start_time) * 1000)

    return present_cards(result, config.currency_symbol)

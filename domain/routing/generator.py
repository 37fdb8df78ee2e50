import math
from collections.abc import Mapping

from domain.models.currency import MULTI_HOP_INTERMEDIARY_CURRENCIES
from domain.models.rate_table import RateTable
from domain.models.route import Provider, Route, RouteKind
from domain.routing.catalog import (
    CORRIDOR_FEES,
    MULTI_HOP_ELIGIBLE_PROVIDERS,
    PAYMENT_PROVIDERS,
    effective_fee,
    get_provider,
)
from domain.routing.ranker import MAX_ROUTES, rank_routes

# Two-hop combinations costing more than this (in percent) are dropped
MAX_MULTI_HOP_FEE_PERCENT = 3.0

MULTI_HOP_SPEED_LABEL = "2-4 days"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def generate_direct_routes(
    amount: float,
    from_currency: str,
    to_currency: str,
    rate_table: RateTable,
    providers: Mapping[str, Provider] = PAYMENT_PROVIDERS,
    corridor_fees: Mapping[str, float] = CORRIDOR_FEES,
) -> list[Route]:
    routes = []
    for provider in providers.values():
        fee = effective_fee(provider, from_currency, to_currency, corridor_fees)
        fee_amount = amount * fee / 100
        converted_amount = rate_table.convert(amount - fee_amount, from_currency, to_currency)

        routes.append(
            Route(
                display_name=provider.name,
                kind=RouteKind.DIRECT,
                path=(from_currency, to_currency),
                total_fee_percent=fee,
                fee_amount=fee_amount,
                converted_amount=converted_amount,
                speed_label=provider.speed_label,
                reliability_score=provider.reliability_score,
            )
        )
    return routes


def generate_multi_hop_routes(
    amount: float,
    from_currency: str,
    to_currency: str,
    rate_table: RateTable,
    providers: Mapping[str, Provider] = PAYMENT_PROVIDERS,
    corridor_fees: Mapping[str, float] = CORRIDOR_FEES,
    eligible_providers: tuple[str, ...] = MULTI_HOP_ELIGIBLE_PROVIDERS,
    intermediaries: tuple[str, ...] = MULTI_HOP_INTERMEDIARY_CURRENCIES,
) -> list[Route]:
    leg_providers = [get_provider(name, providers) for name in eligible_providers]
    routes = []

    for intermediary in intermediaries:
        if intermediary in (from_currency, to_currency):
            continue

        for first in leg_providers:
            for second in leg_providers:
                fee1 = effective_fee(first, from_currency, intermediary, corridor_fees)
                fee2 = effective_fee(second, intermediary, to_currency, corridor_fees)
                total_fee = fee1 + fee2
                if total_fee > MAX_MULTI_HOP_FEE_PERCENT:
                    continue

                first_fee_amount = amount * fee1 / 100
                intermediate_amount = rate_table.convert(
                    amount - first_fee_amount, from_currency, intermediary
                )
                second_fee_amount = intermediate_amount * fee2 / 100
                converted_amount = rate_table.convert(
                    intermediate_amount - second_fee_amount, intermediary, to_currency
                )

                routes.append(
                    Route(
                        display_name=f"{first.name} → {second.name} via {intermediary}",
                        kind=RouteKind.MULTI_HOP,
                        path=(from_currency, intermediary, to_currency),
                        total_fee_percent=total_fee,
                        # Reported in source units as if both percentages applied to the original amount
                        fee_amount=amount * total_fee / 100,
                        converted_amount=converted_amount,
                        speed_label=MULTI_HOP_SPEED_LABEL,
                        reliability_score=_round_half_up(
                            (first.reliability_score + second.reliability_score) / 2
                        ),
                    )
                )
    return routes


def generate_candidate_routes(
    amount: float,
    from_currency: str,
    to_currency: str,
    rate_table: RateTable,
) -> list[Route]:
    """All unranked candidates: direct routes first, then two-hop routes."""
    return [
        *generate_direct_routes(amount, from_currency, to_currency, rate_table),
        *generate_multi_hop_routes(amount, from_currency, to_currency, rate_table),
    ]


def generate_routes(
    amount: float,
    from_currency: str,
    to_currency: str,
    rate_table: RateTable,
    limit: int = MAX_ROUTES,
) -> list[Route]:
    """
    Discover, price and rank transfer routes for one request.

    Neither `from_currency != to_currency` nor `amount > 0` is checked here;
    degenerate inputs produce degenerate but well-formed routes.
    """
    candidates = generate_candidate_routes(amount, from_currency, to_currency, rate_table)
    return rank_routes(candidates, limit=limit)


def get_best_route(
    amount: float,
    from_currency: str,
    to_currency: str,
    rate_table: RateTable,
) -> Route | None:
    routes = generate_routes(amount, from_currency, to_currency, rate_table)
    return routes[0] if routes else None

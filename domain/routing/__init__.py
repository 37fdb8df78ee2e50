from .catalog import (
    CORRIDOR_FEES,
    MIN_FEE_PERCENT,
    MULTI_HOP_ELIGIBLE_PROVIDERS,
    PAYMENT_PROVIDERS,
    effective_fee,
    get_provider,
)
from .generator import (
    MAX_MULTI_HOP_FEE_PERCENT,
    generate_candidate_routes,
    generate_direct_routes,
    generate_multi_hop_routes,
    generate_routes,
    get_best_route,
)
from .ranker import MAX_ROUTES, best_route, rank_routes

__all__ = [
    'CORRIDOR_FEES',
    'MAX_MULTI_HOP_FEE_PERCENT',
    'MAX_ROUTES',
    'MIN_FEE_PERCENT',
    'MULTI_HOP_ELIGIBLE_PROVIDERS',
    'PAYMENT_PROVIDERS',
    'best_route',
    'effective_fee',
    'generate_candidate_routes',
    'generate_direct_routes',
    'generate_multi_hop_routes',
    'generate_routes',
    'get_best_route',
    'get_provider',
    'rank_routes',
]

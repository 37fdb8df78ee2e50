from domain.models.route import Route

MAX_ROUTES = 8


def rank_routes(routes: list[Route], limit: int = MAX_ROUTES) -> list[Route]:
    """
    Order routes best-first by the amount the recipient gets and annotate savings.

    Savings are measured against the worst candidate before truncation, so the
    figure reflects the whole field and not just the displayed slice.
    """
    ranked = sorted(routes, key=lambda route: route.converted_amount, reverse=True)

    worst = ranked[-1].converted_amount if ranked else 0.0
    for route in ranked:
        route.savings = route.converted_amount - worst

    return ranked[:limit]


def best_route(routes: list[Route]) -> Route | None:
    return routes[0] if routes else None

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class RouteKind(str, Enum):
    DIRECT = "direct"
    MULTI_HOP = "multi-hop"


@dataclass(frozen=True)
class Provider:
    name: str
    base_fee_percent: float
    speed_label: str
    reliability_score: int  # 0-100


@dataclass
class Route:
    display_name: str
    kind: RouteKind
    path: tuple[str, ...]
    total_fee_percent: float
    fee_amount: float  # in source currency
    converted_amount: float  # in target currency, after all fees
    speed_label: str
    reliability_score: int
    savings: float = 0.0  # filled in by the ranker

    @property
    def source_currency(self) -> str:
        return self.path[0]

    @property
    def target_currency(self) -> str:
        return self.path[-1]

    @property
    def intermediary_currency(self) -> str | None:
        return self.path[1] if len(self.path) == 3 else None

    def to_dict(self) -> dict:
        return {
            "display_name": self.display_name,
            "kind": self.kind.value,
            "path": list(self.path),
            "total_fee_percent": self.total_fee_percent,
            "fee_amount": self.fee_amount,
            "converted_amount": self.converted_amount,
            "speed_label": self.speed_label,
            "reliability_score": self.reliability_score,
            "savings": self.savings,
        }


@dataclass(frozen=True)
class OptimizationRecord:
    id: int
    amount: float
    from_currency: str
    to_currency: str
    route: dict
    created_at: datetime

from datetime import datetime

from pydantic import BaseModel, Field

from domain.models.route import OptimizationRecord, Route


class RouteResponse(BaseModel):
	display_name: str = Field(..., description='Provider name, or "A → B via XXX" for two-hop routes')
	kind: str = Field(..., description='direct or multi-hop')
	path: list[str] = Field(..., description='Currencies visited, source first')
	total_fee_percent: float
	fee_amount: float = Field(..., description='Fee in source currency')
	converted_amount: float = Field(..., description='Amount received in target currency')
	speed_label: str
	reliability_score: int
	savings: float = Field(..., description='Extra received compared to the worst route')

	@classmethod
	def from_route(cls, route: Route) -> 'RouteResponse':
		return cls(**route.to_dict())


class RoutesResponse(BaseModel):
	from_currency: str
	to_currency: str
	amount: float
	best_route: RouteResponse | None
	routes: list[RouteResponse]
	rates_source: str = Field(..., description='Where the rate table came from')
	rates_timestamp: datetime | None

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'amount': 1000.0,
				'best_route': {
					'display_name': 'OFX',
					'kind': 'direct',
					'path': ['USD', 'EUR'],
					'total_fee_percent': 0.3,
					'fee_amount': 3.0,
					'converted_amount': 917.24,
					'speed_label': '1-2 days',
					'reliability_score': 96,
					'savings': 12.5,
				},
				'routes': [],
				'rates_source': 'seed',
				'rates_timestamp': None,
			}
		}


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: float = Field(..., description='Original amount requested')
	converted_amount: float = Field(..., description='Converted amount')
	exchange_rate: float = Field(..., description='Exchange rate used for conversion')
	timestamp: datetime | None = Field(None, description='When the rate snapshot was taken')
	source: str = Field(..., description='Source of the rate table')


class RateTableResponse(BaseModel):
	base_currency: str
	rates: dict[str, float]
	source: str
	timestamp: datetime | None


class ProviderResponse(BaseModel):
	name: str
	base_fee_percent: float
	speed_label: str
	reliability_score: int
	multi_hop_eligible: bool


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[str] = Field(description='List of currency codes')

	class ConfigDict:
		json_schema_extra = {'examples': [{'currencies': ['USD', 'EUR', 'GBP', 'JPY']}]}


class HistoryEntryResponse(BaseModel):
	id: int
	amount: float
	from_currency: str
	to_currency: str
	route: RouteResponse
	created_at: datetime

	@classmethod
	def from_record(cls, record: OptimizationRecord) -> 'HistoryEntryResponse':
		return cls(
			id=record.id,
			amount=record.amount,
			from_currency=record.from_currency,
			to_currency=record.to_currency,
			route=RouteResponse(**record.route),
			created_at=record.created_at,
		)

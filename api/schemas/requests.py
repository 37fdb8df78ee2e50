from pydantic import BaseModel, Field, ValidationInfo, field_validator


class HistoryRequest(BaseModel):
	from_currency: str = Field(..., min_length=3, max_length=3)
	to_currency: str = Field(..., min_length=3, max_length=3)
	amount: float = Field(..., gt=0, allow_inf_nan=False)
	route_name: str | None = Field(None, description='Route to record; defaults to the best route')

	@field_validator('from_currency', 'to_currency')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()

	@field_validator('to_currency')
	@classmethod
	def currencies_must_be_different(cls, v: str, info: ValidationInfo):
		if info.data and 'from_currency' in info.data and v == info.data['from_currency']:
			raise ValueError('from_currency and to_currency must be different')
		return v

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'from_currency': 'USD',
				'to_currency': 'INR',
				'amount': 1000.00,
				'route_name': 'OFX',
			}
		}

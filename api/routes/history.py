from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_history_service
from api.schemas import HistoryEntryResponse, HistoryRequest
from application.services import OptimizationHistoryService

router = APIRouter(prefix='/api/history', tags=['history'])


@router.post(
	'',
	response_model=HistoryEntryResponse,
	status_code=status.HTTP_201_CREATED,
	summary='Record a selected route',
)
async def record_selection(
	request: HistoryRequest,
	service: Annotated[OptimizationHistoryService, Depends(get_history_service)],
) -> HistoryEntryResponse:
	record = await service.record(
		request.amount, request.from_currency, request.to_currency, request.route_name
	)
	return HistoryEntryResponse.from_record(record)


@router.get(
	'',
	response_model=list[HistoryEntryResponse],
	status_code=status.HTTP_200_OK,
	summary='Recent route selections, newest first',
)
async def list_history(
	service: Annotated[OptimizationHistoryService, Depends(get_history_service)],
	limit: Annotated[int | None, Query(gt=0, le=50)] = None,
) -> list[HistoryEntryResponse]:
	records = await service.recent(limit)
	return [HistoryEntryResponse.from_record(record) for record in records]

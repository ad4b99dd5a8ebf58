"""Routes for evaluating flights and running batches."""

import logging
from fastapi import APIRouter, HTTPException
from ..config import LOAD_FAILURE_MESSAGE
from ..data_loader import LoadFailure
from ..report import format_result_line, summarize_results
from ..schemas.planning_schemas import EvaluateRequest, EvaluateResponse, BatchRunResponse
from ..services.singleton import get_planning_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["planning"])


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_flights(request: EvaluateRequest):
    """
    Evaluate candidate flights against the loaded reference data.
    
    Args:
        request: Flights to evaluate, in order
        
    Returns:
        One result and one report line per flight, in request order
    """
    planning_service = get_planning_service()
    symbol = planning_service.config.CURRENCY_SYMBOL
    
    try:
        results = planning_service.evaluate(
            [flight.to_flight_request() for flight in request.flights]
        )
    except LoadFailure as e:
        logger.error(f"Error loading reference data: {e}")
        raise HTTPException(status_code=500, detail=LOAD_FAILURE_MESSAGE)
    
    return EvaluateResponse(
        results=results,
        lines=[format_result_line(result, symbol) for result in results],
        summary=summarize_results(results),
    )


@router.post("/batches/{name}/run", response_model=BatchRunResponse)
async def run_batch(name: str):
    """
    Run a configured batch from disk and write its report file.
    
    Args:
        name: Configured batch name (e.g. "valid")
        
    Returns:
        Report location, summary and rendered lines
    """
    planning_service = get_planning_service()
    batches = planning_service.config.FLIGHT_BATCHES
    
    if name not in batches:
        raise HTTPException(status_code=404, detail=f"Unknown batch: {name}")
    
    report = planning_service.run_batch(
        name, batches[name], planning_service.output_path_for(name)
    )
    if not report.is_loaded():
        raise HTTPException(status_code=500, detail=report.error)
    
    symbol = planning_service.config.CURRENCY_SYMBOL
    return BatchRunResponse(
        name=name,
        output_path=report.output_path,
        summary=summarize_results(report.results),
        lines=[format_result_line(result, symbol) for result in report.results],
    )

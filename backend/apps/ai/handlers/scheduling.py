"""POST /ai/* - Scheduling and availability predictions."""

from fastapi import Depends

from apps.ai.helpers import run_flow_action
from dependencies import get_llm_service
from flows import (
    EstimateTravelDistanceInput,
    PredictNextAvailableTechniciansInput,
    PredictScheduleRiskInput,
    SuggestScheduleTimeInput,
    estimate_travel_distance,
    predict_next_available_technicians,
    predict_schedule_risk,
    suggest_schedule_time,
)
from llm import BaseLLMService
from responses import ActionResult


async def suggest_schedule_time_action(
    payload: SuggestScheduleTimeInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        SuggestScheduleTimeInput,
        suggest_schedule_time,
        llm,
        failure="Failed to suggest schedule time. Please try again.",
    )


async def predict_next_available_technicians_action(
    payload: PredictNextAvailableTechniciansInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        PredictNextAvailableTechniciansInput,
        predict_next_available_technicians,
        llm,
        failure="Failed to predict next available technicians.",
    )


async def predict_schedule_risk_action(
    payload: PredictScheduleRiskInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        PredictScheduleRiskInput,
        predict_schedule_risk,
        llm,
        failure="Failed to check schedule risk. Please try again.",
    )


async def estimate_travel_distance_action(
    payload: EstimateTravelDistanceInput,
    llm: BaseLLMService = Depends(get_llm_service),
) -> ActionResult:
    return await run_flow_action(
        payload,
        EstimateTravelDistanceInput,
        estimate_travel_distance,
        llm,
        failure="Failed to estimate travel distance. Please try again.",
    )

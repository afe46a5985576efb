from fastapi import APIRouter

health_router = APIRouter(tags=["Health"])


@health_router.get(
    "/health/live",
    summary="Liveness probe",
    description="Returns 200 if the probe process is running.",
    responses={200: {"description": "Service is alive."}},
)
async def live() -> dict:
    return {"status": "ok"}

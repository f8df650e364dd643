from fastapi import APIRouter

from schemas.responses import HealthResponse

router = APIRouter(tags=["Health"])
parent_route = "/health"


@router.get('', response_model=HealthResponse)
def health():
    return {
        "route": parent_route + "",
        "data": {
            "health": "Server is healthy."
        }
    }

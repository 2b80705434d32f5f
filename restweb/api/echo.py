from fastapi import APIRouter

from restweb.models import EchoRequest, EchoResponse

router = APIRouter()


@router.post("/echo", response_model=EchoResponse)
async def echo(request: EchoRequest) -> EchoResponse:
    return EchoResponse(received=request.as_dict(), status="success")

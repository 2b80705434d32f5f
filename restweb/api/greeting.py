"""
Greeting endpoints.
Fixed greeting and a greeting built from the path parameter.
"""
from fastapi import APIRouter

from restweb.models import GreetingResponse

router = APIRouter()

HELLO_MESSAGE = "Hello Ritika from REST API"


@router.get("/hello", response_model=GreetingResponse)
async def hello() -> GreetingResponse:
    return GreetingResponse(message=HELLO_MESSAGE, status="success")


@router.get("/greet/{name}", response_model=GreetingResponse)
async def greet(name: str) -> GreetingResponse:
    """Greet `name` verbatim, no sanitization"""
    return GreetingResponse(message=f"Hello, {name}!", status="success")

from restweb.models.echo import EchoRequest, EchoResponse
from restweb.models.greeting import GreetingResponse
from restweb.models.health import HealthResponse

__all__ = [
    "EchoRequest", "EchoResponse", "GreetingResponse", "HealthResponse"
]

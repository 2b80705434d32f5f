"""
Pydantic models for the echo endpoint.
The request is a schema-free JSON object whose values must all be strings.
"""
from typing import Dict
from pydantic import BaseModel, RootModel


class EchoRequest(RootModel[Dict[str, str]]):
    """Arbitrary string-to-string mapping supplied by the caller"""

    def as_dict(self) -> Dict[str, str]:
        return dict(self.root)


class EchoResponse(BaseModel):
    received: Dict[str, str]
    status: str = "success"

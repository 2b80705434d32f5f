"""
Health check response model.
Carries the service status string reported by /api/health.
"""
from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: str

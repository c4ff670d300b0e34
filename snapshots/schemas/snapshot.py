from pydantic import BaseModel

class GenerateRequest(BaseModel):
    # Passed through untouched; empty topics are the model's problem
    topic: str

class HealthResponse(BaseModel):
    status: str
    strategy: str

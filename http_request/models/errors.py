from pydantic import BaseModel


class ErrorDefinition(BaseModel):
    """Stable identity of a locally raised error."""

    code: str
    domain: str
    title: str
    message: str

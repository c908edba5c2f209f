"""
Response model for Google Maps web service calls.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class MapsResult(BaseModel):
    """
    Parsed JSON body of a web service response.
    
    Only ``status`` is required. Every other top-level field of the body is
    kept as-is and reachable as an attribute, by key, or through to_dict().
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    status: str
    error_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the response body as received, null values included."""
        return self.model_dump(exclude_unset=True)

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self.to_dict()

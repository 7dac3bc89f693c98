"""
Request bodies for the public endpoints.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

# Wire names kept exactly as the mobile client sends them.
_REQUIRED = ("email", "password", "nombre", "rol", "empresa_id")


class CreateUserRequest(BaseModel):
    """Body of POST /create-user-by-admin.

    Every field is optional at parse time and accepted as-is (no trimming,
    no coercion); presence is checked afterwards by ``missing_fields`` so the
    endpoint can answer with a single 400 instead of a per-field 422.
    """

    model_config = ConfigDict(extra="ignore")

    email: Any = None
    password: Any = None
    display_name: Any = Field(default=None, alias="nombre")
    role: Any = Field(default=None, alias="rol")
    organization_id: Any = Field(default=None, alias="empresa_id")

    @classmethod
    def from_payload(cls, payload: Any) -> "CreateUserRequest":
        """Build from decoded JSON; anything but an object has no fields."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)

    def missing_fields(self) -> List[str]:
        """Wire names of required fields that are absent or empty."""
        values = self.model_dump(by_alias=True)
        return [name for name in _REQUIRED if not values.get(name)]

    def password_too_short(self, min_length: int) -> bool:
        if not isinstance(self.password, str):
            return True
        return len(self.password) < min_length

    def user_metadata(self) -> Dict[str, Any]:
        """Metadata bag consumed by the profile trigger."""
        return {
            "nombre":     self.display_name,
            "rol":        self.role,
            "empresa_id": self.organization_id,
        }

"""Pydantic model for the persisted/exchanged X25519 key record."""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SUITE_ID: str = "X25519KeyAgreementKey2019"
SUITE_CONTEXT: str = "https://w3id.org/security/suites/x25519-2019/v1"


class KeyAgreementKeyRecord(BaseModel):
    """Serialized form of an X25519KeyAgreementKey2019 key pair.

    Field names are snake_case in Python and camelCase on the wire
    (``publicKeyBase58``, ``privateKeyBase58``). Unknown fields are ignored
    so records embedded in larger documents can be read directly.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    context: Union[str, list[str], None] = Field(default=None, alias="@context")
    id: Optional[str] = None
    type: str = SUITE_ID
    controller: Optional[str] = None
    public_key_base58: Optional[str] = Field(default=None, alias="publicKeyBase58")
    private_key_base58: Optional[str] = Field(default=None, alias="privateKeyBase58")
    revoked: Optional[str] = None

    def to_dict(self) -> dict[str, object]:
        """Serialize to the wire format, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["KeyAgreementKeyRecord", "SUITE_CONTEXT", "SUITE_ID"]

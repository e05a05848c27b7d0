from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenData(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	token: str
	expires_at: Optional[str] = Field(None, alias="expiresAt")


class TokenResponse(BaseModel):
	"""Body of the access token endpoint."""
	data: list[TokenData] = Field(default_factory=list)
	ok: Optional[bool] = None
	message: Optional[str] = None

	def token(self) -> str:
		if self.data:
			return self.data[0].token
		return ""

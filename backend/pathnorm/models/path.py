"""Wire models for tokens and canonical commands."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathnorm.svg.commands import CanonicalCommand, Token


class TokenModel(BaseModel):
    kind: str
    params: list[float] = Field(default_factory=list)

    @classmethod
    def from_token(cls, token: Token) -> "TokenModel":
        return cls(kind=token.kind, params=list(token.params))


class CommandModel(BaseModel):
    kind: str
    params: list[float] = Field(default_factory=list)

    @classmethod
    def from_command(cls, cmd: CanonicalCommand) -> "CommandModel":
        return cls(kind=cmd.kind, params=list(cmd.params))

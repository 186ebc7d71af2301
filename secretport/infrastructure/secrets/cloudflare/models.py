"""Cloudflare Workers Secrets wire models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class WorkerSecretBindingType(str, Enum):
    """Binding types accepted by the Workers secrets endpoint."""

    SECRET_TEXT = "secret_text"


@dataclass(frozen=True, slots=True, kw_only=True)
class WorkersPutSecretRequest:
    """Body of PUT /accounts/{account}/workers/scripts/{script}/secrets.

    Attributes:
        name: Secret (binding) name visible to the Worker.
        text: Secret value.
        type: Binding type; always secret_text for this adapter.
    """

    name: str
    text: str
    type: WorkerSecretBindingType = WorkerSecretBindingType.SECRET_TEXT

    def to_payload(self) -> dict[str, str]:
        return {"name": self.name, "text": self.text, "type": self.type.value}

    def __repr__(self) -> str:
        return f"WorkersPutSecretRequest(name={self.name!r}, type={self.type.value!r})"


@dataclass(frozen=True, slots=True, kw_only=True)
class WorkersPutSecretResponse:
    """`result` object of a successful secret write (value is never echoed)."""

    name: str
    type: str

    @classmethod
    def from_result(cls, result: dict[str, Any]) -> "WorkersPutSecretResponse":
        return cls(
            name=str(result.get("name", "")),
            type=str(result.get("type", WorkerSecretBindingType.SECRET_TEXT.value)),
        )

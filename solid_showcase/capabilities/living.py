"""
Living beings modelled as a tagged variant family with capability sets.

Humans breathe and work; plants photosynthesize. A plant has no ``breathe``
method at all, so nothing can call it expecting a breather and get an error
instead. Callers check ``isinstance(being, Breather)`` or
``capabilities_of(being)``.
"""

from __future__ import annotations

from typing import Annotated, Any, FrozenSet, Literal, Mapping, Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field, TypeAdapter

from solid_showcase.capabilities.output import OutputSink


@runtime_checkable
class Breather(Protocol):
    def breathe(self, sink: OutputSink) -> None: ...


@runtime_checkable
class Worker(Protocol):
    def work(self, sink: OutputSink) -> None: ...


@runtime_checkable
class Photosynthesizer(Protocol):
    def photosynthesize(self, sink: OutputSink) -> None: ...


class _Being(BaseModel):
    name: str
    age: int = Field(..., ge=0)

    model_config = {"frozen": True}


class Human(_Being):
    kind: Literal["human"] = "human"
    job: str

    def breathe(self, sink: OutputSink) -> None:
        sink.emit(f"{self.name}: I'm breathing")

    def work(self, sink: OutputSink) -> None:
        sink.emit(f"{self.name}: I'm working ({self.job})")


class Plant(_Being):
    kind: Literal["plant"] = "plant"
    color: str

    def photosynthesize(self, sink: OutputSink) -> None:
        sink.emit(f"{self.name}: I'm photosynthesizing")


LivingBeing = Annotated[Union[Human, Plant], Field(discriminator="kind")]

_living_being_adapter: TypeAdapter[Union[Human, Plant]] = TypeAdapter(LivingBeing)

_CAPABILITIES = (
    ("breather", Breather),
    ("worker", Worker),
    ("photosynthesizer", Photosynthesizer),
)


def parse_living_being(data: Mapping[str, Any]) -> Union[Human, Plant]:
    """Build the right variant from a mapping carrying a ``kind`` tag."""
    return _living_being_adapter.validate_python(dict(data))


def capabilities_of(being: object) -> FrozenSet[str]:
    """Names of the capabilities ``being`` genuinely implements."""
    return frozenset(name for name, protocol in _CAPABILITIES if isinstance(being, protocol))


__all__ = [
    "Breather",
    "Human",
    "LivingBeing",
    "Photosynthesizer",
    "Plant",
    "Worker",
    "capabilities_of",
    "parse_living_being",
]

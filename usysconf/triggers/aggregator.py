"""Result aggregation — positionally stable output collection."""

from __future__ import annotations

from usysconf.triggers.models import Output, Status


class OutputBuilder:
    """Collect the outputs of one trigger run.

    Placeholders are appended during fan-out, in bin declaration order and
    expansion order, and filled by index as each invocation finishes.
    Nothing is ever removed, so a failing invocation cannot shift the
    outputs of the ones after it.
    """

    def __init__(self) -> None:
        self._outputs: list[Output] = []

    def __len__(self) -> int:
        return len(self._outputs)

    def placeholder(self, name: str, sub_task: str | None = None) -> int:
        self._outputs.append(Output(name=name, sub_task=sub_task))
        return len(self._outputs) - 1

    def fill(self, index: int, result: Output) -> None:
        slot = self._outputs[index]
        slot.status = result.status
        slot.message = result.message

    def build(self) -> list[Output]:
        return list(self._outputs)

    @staticmethod
    def skipped(name: str) -> list[Output]:
        return [Output(name=name, status=Status.SKIPPED)]

    @staticmethod
    def failed(name: str, message: str) -> list[Output]:
        return [Output(name=name, status=Status.FAILURE, message=message)]

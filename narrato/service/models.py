from dataclasses import dataclass, field


@dataclass(frozen=True)
class NarrationResponse:
    """Transport-neutral response: HTTP-style status code plus JSON-ready body."""

    status_code: int
    body: dict[str, object] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

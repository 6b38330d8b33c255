from dataclasses import dataclass, field


@dataclass
class SendResult:
    channel: str  # e.g. "telegram", "email(resend)"
    success: bool
    error: str | None = None

    @property
    def summary(self) -> str:
        return f"{self.channel}:{'true' if self.success else 'false'}"


@dataclass
class DispatchResult:
    results: list[SendResult] = field(default_factory=list)

    @property
    def overall_success(self) -> bool:
        return any(r.success for r in self.results)

    @property
    def detail(self) -> list[str]:
        return [r.summary for r in self.results]

    @property
    def errors(self) -> list[str]:
        return [r.error for r in self.results if not r.success and r.error]

    @property
    def status_code(self) -> int:
        return 200 if self.overall_success else 500

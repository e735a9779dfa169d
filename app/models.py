import enum


class Priority(str, enum.Enum):
    # P1 is the most urgent
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"

    @classmethod
    def default(cls) -> "Priority":
        return cls.P3

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Priority.P1: "urgent",
    Priority.P2: "high",
    Priority.P3: "normal",
    Priority.P4: "low",
}

"""Column (status) domain model and accent palette."""

from pydantic import BaseModel, ConfigDict

UNASSIGNED_COLUMN_ID = "__unassigned__"


class AccentTriple(BaseModel):
    """Background, light and text shades used to draw a column."""

    model_config = ConfigDict(frozen=True)

    bg: str
    light: str
    text: str


# Colors offered to newly added columns
ACCENT_PALETTE: tuple[AccentTriple, ...] = (
    AccentTriple(bg="#EF4444", light="#FEF2F2", text="#991B1B"),  # Red
    AccentTriple(bg="#F97316", light="#FFF7ED", text="#9A3412"),  # Orange
    AccentTriple(bg="#EAB308", light="#FEFCE8", text="#854D0E"),  # Yellow
    AccentTriple(bg="#22C55E", light="#F0FDF4", text="#166534"),  # Green
    AccentTriple(bg="#06B6D4", light="#F0F9FF", text="#0C4A6E"),  # Cyan
    AccentTriple(bg="#8B5CF6", light="#FAF5FF", text="#581C87"),  # Purple
    AccentTriple(bg="#EC4899", light="#FDF2F8", text="#9D174D"),  # Pink
)


class Column(BaseModel):
    """A board lane that features are grouped into.

    `id` is the only key the board uses; `name` is a display label and may
    repeat across columns.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str
    light_color: str | None = None
    text_color: str | None = None

    @classmethod
    def with_accent(cls, column_id: str, name: str, accent: AccentTriple) -> "Column":
        """Create a column drawn with the given accent triple."""
        return cls(
            id=column_id,
            name=name,
            color=accent.bg,
            light_color=accent.light,
            text_color=accent.text,
        )

    @property
    def accent(self) -> AccentTriple | None:
        """The full accent triple, if this column carries derived shades."""
        if self.light_color is None or self.text_color is None:
            return None
        return AccentTriple(bg=self.color, light=self.light_color, text=self.text_color)

    @property
    def is_unassigned(self) -> bool:
        return self.id == UNASSIGNED_COLUMN_ID


# Holds features ingested while the board had no columns at all
UNASSIGNED_COLUMN = Column(
    id=UNASSIGNED_COLUMN_ID,
    name="Unassigned",
    color="#94A3B8",
    light_color="#F8FAFC",
    text_color="#334155",
)

"""Target coordinate frame of a user sight."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Frame:
    """Fixed-size box that fitted geometry must lie inside.

    Attributes:
        width: Frame width in normalized sight units
        height: Frame height in normalized sight units
    """

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height


# Unzoomed War Thunder sight: x in [-0.89, 0.89], y in [-0.5, 0.5]
SIGHT_FRAME = Frame(width=1.78, height=1.0)

"""The battery segment.

Reads the Linux power supply class in sysfs. Other platforms, and machines
without a battery, show nothing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from pydantic import Field

from promptr.exceptions import SegmentError
from promptr.render import Fragment

from ._base import Segment, SegmentArgs, SegmentContext

POWER_SUPPLY_DIR = Path("/sys/class/power_supply")

FULL_CAPACITY = 100


@dataclass(frozen=True, slots=True)
class BatteryReading:
    """Charge level and state of one battery.

    Attributes:
        capacity: Charge in percent.
        state: One of ``charging``, ``discharging``, ``full`` or ``empty``.
    """

    capacity: int
    state: str


def _read(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError:
        return None


def _capacity(supply: Path) -> int:
    capacity = _read(supply / "capacity")
    if capacity is not None:
        return int(capacity)

    # Older drivers only report energy or charge counters
    for prefix in ("energy", "charge"):
        now = _read(supply / f"{prefix}_now")
        full = _read(supply / f"{prefix}_full")
        if now is not None and full:
            return round(int(now) * 100 / int(full))

    msg = f"No charge level reported in {supply}"
    raise SegmentError(msg, segment="battery")


def _state(status: str | None, capacity: int) -> str:
    match status:
        case "Charging":
            return "charging"
        case "Full":
            return "full"
        case "Empty":
            return "empty"
        case _ if capacity <= 0:
            return "empty"
        case _:
            # Discharging, Not charging and Unknown
            return "discharging"


def read_battery(power_supply_dir: Path = POWER_SUPPLY_DIR) -> BatteryReading | None:
    """Read the first battery listed under the power supply class.

    Args:
        power_supply_dir: The sysfs power supply directory.

    Returns:
        The reading, or None when no battery is present.

    Raises:
        SegmentError: If a battery is present but reports no charge level.
    """
    if not power_supply_dir.is_dir():
        return None

    for supply in sorted(power_supply_dir.iterdir()):
        if _read(supply / "type") != "Battery":
            continue
        if _read(supply / "present") == "0":
            continue
        capacity = _capacity(supply)
        return BatteryReading(capacity, _state(_read(supply / "status"), capacity))
    return None


class BatteryArgs(SegmentArgs):
    """Arguments for the battery segment.

    Attributes:
        low_battery_threshold: Percentage below which a discharging battery
            is shown with the low colors.
    """

    low_battery_threshold: float = Field(default=50.0, ge=0, le=100)


class BatterySegment(Segment[BatteryArgs]):
    """Shows the charge level, e.g. ``87% <glyph>``."""

    name: ClassVar[str] = "battery"
    kind: ClassVar[str] = "battery"
    args_model: ClassVar[type[SegmentArgs]] = BatteryArgs

    def compute(self, context: SegmentContext) -> list[Fragment]:
        reading = read_battery()
        if reading is None:
            context.logger.debug("battery_not_found")
            return []

        capacity = FULL_CAPACITY if reading.state == "full" else reading.capacity
        color_state = reading.state
        if reading.state == "discharging" and capacity < self.args.low_battery_threshold:
            color_state = "low"

        colors = self.style(context, color_state)
        glyph = context.theme.glyph(self.kind, reading.state)
        return [
            Fragment(
                f"{capacity}% {glyph}",
                colors.fg,
                colors.bg,
                source=f"Battery::{reading.state.capitalize()}",
            )
        ]

"""Human-readable status report over a registry snapshot.

Classification (staleness, temperature band) is computed first as plain
data; colours are applied only when the text is rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydevinfo._constants import HOUSEKEEPING_TIMEOUT, TEMPERATURE_NORMAL_MAX, TEMPERATURE_WARM_MAX
from pydevinfo._style import PLAIN, Styler
from pydevinfo.models.device import Device
from pydevinfo.state.registry import DeviceRegistry


class Staleness(StrEnum):
    FRESH = "fresh"
    STALE = "stale"


class TemperatureBand(StrEnum):
    NORMAL = "normal"
    WARM = "warm"
    HOT = "hot"


def classify_staleness(elapsed: int, threshold: int = HOUSEKEEPING_TIMEOUT) -> Staleness:
    """``STALE`` only once *elapsed* strictly exceeds *threshold*."""
    return Staleness.STALE if elapsed > threshold else Staleness.FRESH


def classify_temperature(temperature: float) -> TemperatureBand:
    """Band a reading; boundary values belong to the lower band."""
    if temperature <= TEMPERATURE_NORMAL_MAX:
        return TemperatureBand.NORMAL
    if temperature <= TEMPERATURE_WARM_MAX:
        return TemperatureBand.WARM
    return TemperatureBand.HOT


_UNITS: tuple[tuple[str, int], ...] = (
    ("d", 86_400),
    ("h", 3_600),
    ("m", 60),
    ("s", 1),
)


def format_duration(seconds: int) -> str:
    """Compact uptime text, e.g. ``93784`` renders as ``1d 2h 3m 4s``."""
    remaining = max(int(seconds), 0)
    parts: list[str] = []
    for suffix, size in _UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{suffix}")
    return " ".join(parts) if parts else "0s"


@dataclass(frozen=True)
class DeviceStatus:
    """One classified row of the status report."""

    device: Device
    elapsed: int
    staleness: Staleness
    temperature_band: TemperatureBand


class StatusReporter:
    """Render the registry into a deterministic text report."""

    def __init__(
        self,
        registry: DeviceRegistry,
        *,
        stale_after_seconds: int = HOUSEKEEPING_TIMEOUT,
        styler: Styler = PLAIN,
    ) -> None:
        self._registry = registry
        self._stale_after = stale_after_seconds
        self._styler = styler

    def entries(self, now: int) -> list[DeviceStatus]:
        """Classify every device, in registration order."""
        rows: list[DeviceStatus] = []
        for device in self._registry.list_devices():
            # A clock running behind the last update counts as "just now".
            elapsed = max(now - device.last_update, 0)
            rows.append(
                DeviceStatus(
                    device=device,
                    elapsed=elapsed,
                    staleness=classify_staleness(elapsed, self._stale_after),
                    temperature_band=classify_temperature(device.temperature),
                )
            )
        return rows

    def render(self, now: int) -> str:
        return "".join(self._render_entry(row) for row in self.entries(now))

    def _render_entry(self, row: DeviceStatus) -> str:
        s = self._styler
        dev = row.device

        onboard = s.bold_green("true") if dev.onboard else s.red("false")
        elapsed = format_duration(row.elapsed)
        elapsed = s.red(elapsed) if row.staleness is Staleness.STALE else s.green(elapsed)

        temperature = f"{dev.temperature}"
        if row.temperature_band is TemperatureBand.NORMAL:
            temperature = s.green(temperature)
        elif row.temperature_band is TemperatureBand.WARM:
            temperature = s.yellow(temperature)
        else:
            temperature = s.red(temperature)

        return (
            f"{s.blue(dev.name)}\n"
            f"\tOnboard: {onboard} (Last updated: {elapsed} ago)\n"
            f"\tSW uptime: {format_duration(dev.sw_uptime)}\n"
            f"\tTemperature: {temperature}°C\n"
            f"\tUptime: {format_duration(dev.uptime)}\n"
            f"\tHostname: {dev.hostname}\n"
            f"\tOs: {dev.os}\n"
        )

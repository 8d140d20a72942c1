"""Presentation lookups keyed by ``ElevatorStatus``.

Views pick icons, labels and colours from these tables instead of parsing
the free-text status message.
"""
from __future__ import annotations

from typing import Dict

from .elevator import ElevatorStatus

STATUS_LABELS: Dict[ElevatorStatus, str] = {
    ElevatorStatus.IDLE: "Idle",
    ElevatorStatus.MOVING_UP: "Moving Up",
    ElevatorStatus.MOVING_DOWN: "Moving Down",
    ElevatorStatus.LOADING: "Loading",
    ElevatorStatus.UNLOADING: "Unloading",
    ElevatorStatus.ARRIVED_OPENING: "Arrived",
    ElevatorStatus.DISABLED: "Disabled",
}

STATUS_ICONS: Dict[ElevatorStatus, str] = {
    ElevatorStatus.IDLE: "💤",
    ElevatorStatus.MOVING_UP: "⬆️",
    ElevatorStatus.MOVING_DOWN: "⬇️",
    ElevatorStatus.LOADING: "⏳",
    ElevatorStatus.UNLOADING: "⏳",
    ElevatorStatus.ARRIVED_OPENING: "🛗",
    ElevatorStatus.DISABLED: "🚫",
}

STATUS_COLORS: Dict[ElevatorStatus, str] = {
    ElevatorStatus.IDLE: "#6c757d",
    ElevatorStatus.MOVING_UP: "#28a745",
    ElevatorStatus.MOVING_DOWN: "#dc3545",
    ElevatorStatus.LOADING: "#ffc107",
    ElevatorStatus.UNLOADING: "#fd7e14",
    ElevatorStatus.ARRIVED_OPENING: "#ffc107",
    ElevatorStatus.DISABLED: "#6c757d",
}

STATUS_CSS_CLASSES: Dict[ElevatorStatus, str] = {
    ElevatorStatus.IDLE: "idle",
    ElevatorStatus.MOVING_UP: "moving-up",
    ElevatorStatus.MOVING_DOWN: "moving-down",
    ElevatorStatus.LOADING: "loading",
    ElevatorStatus.UNLOADING: "loading",
    ElevatorStatus.ARRIVED_OPENING: "loading",
    ElevatorStatus.DISABLED: "disabled",
}


def describe_status(status: ElevatorStatus) -> Dict[str, str]:
    return {
        "label": STATUS_LABELS[status],
        "icon": STATUS_ICONS[status],
        "color": STATUS_COLORS[status],
        "css_class": STATUS_CSS_CLASSES[status],
    }

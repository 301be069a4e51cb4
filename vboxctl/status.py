"""Translate raw VBoxManage output into friendly status text."""

import re

# keyword -> marker
STATE_MARKERS = {
    "running": "✅",
    "paused": "⏸",
    "saved": "💾",
    "powered off": "⏹",
    "aborted": "❌",
}

_STATE_PATTERN = re.compile("|".join(re.escape(k) for k in STATE_MARKERS))

UNKNOWN_STATE = "unknown"


def annotate(text: str) -> str:
    """Prefix every known state keyword in text with its marker.

    A single pass over each line, so each keyword occurrence is marked once
    and lines without keywords come back unchanged.
    """
    return "\n".join(
        _STATE_PATTERN.sub(lambda m: f"{STATE_MARKERS[m.group(0)]} {m.group(0)}", line)
        for line in text.split("\n")
    )


def _label_value(line: str, label: str) -> str | None:
    if line.startswith(label):
        return line[len(label):].strip()
    return None


def extract_state(info: str, long: bool = False) -> str:
    """Pull the state out of 'showvminfo' output.

    The long form keeps the parenthetical detail, e.g.
    "running (since 2024-01-01T10:00:00.000000000)"; the short form is just
    the state itself.
    """
    for line in info.splitlines():
        state = _label_value(line, "State:")
        if state is None:
            continue
        if long:
            return state
        return state.split(" (", 1)[0].strip()
    return UNKNOWN_STATE


def parse_vm_states(listing: str) -> list[tuple[str, str]]:
    """Pair VM names with their short state from 'list vms -l' output.

    Shared folders and snapshots also have 'Name:' lines, but those come
    after the VM's own 'State:', so the latest name seen is the right one.
    """
    pairs = []
    name = None
    for line in listing.splitlines():
        value = _label_value(line, "Name:")
        if value is not None:
            name = value
            continue
        state = _label_value(line, "State:")
        if state is not None and name is not None:
            pairs.append((name, state.split(" (", 1)[0].strip()))
            name = None
    return pairs


def format_vm_states(pairs: list[tuple[str, str]]) -> str:
    """Render name/state pairs as aligned, annotated lines."""
    if not pairs:
        return ""
    width = max(len(name) for name, _ in pairs)
    return "\n".join(f"{name.ljust(width)}  {annotate(state)}" for name, state in pairs)


def forwarding_rules(info: str) -> list[str]:
    """NAT port-forwarding rule lines from 'showvminfo' output."""
    return [
        line for line in info.splitlines()
        if line.startswith("NIC") and "Rule" in line
    ]

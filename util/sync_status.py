from typing import Dict, List, Optional, Tuple


def sync_status_fragments(snapshot: Dict[str, Optional[object]], store_label: str, connected: bool) -> List[Tuple[str, str]]:
    """Unified status label for the remote store."""
    has_issue = bool(snapshot.get("last_error"))
    label = f"{store_label} ■" if connected else f"{store_label} □"
    in_flight = int(snapshot.get("in_flight") or 0)
    if in_flight:
        label = f"{label} saving({in_flight})"
    if has_issue:
        label = f"{label} !"
    elif snapshot.get("last_pull") or snapshot.get("last_push"):
        lp = snapshot.get("last_pull") or "—"
        lpsh = snapshot.get("last_push") or "—"
        label = f"{label} pull={lp} push={lpsh}"

    if has_issue:
        style = "class:status.fail"
    elif in_flight:
        style = "class:icon.warn"
    else:
        style = "class:icon.check" if connected else "class:text.dim"
    return [(style, label)]


__all__ = ["sync_status_fragments"]

from typing import List

from .model import LayoutResult, Rejection


def format_inches(value: float) -> str:
    return f'{value:.2f}"'


def format_layout(result: LayoutResult) -> str:
    lines: List[str] = [
        f"Evenly distributed gap between pictures: {format_inches(result.gap)}",
    ]
    for i, center in enumerate(result.picture_centers):
        lines.append(f"Picture {i + 1} Center: {format_inches(center)}")
    if any(result.vertical_offsets):
        for i in range(result.quantity):
            offset = result.vertical_offsets[i]
            lines.append(
                f"Picture {i + 1} Top: {format_inches(result.top_edge(i))} "
                f"(offset {offset:+.2f})"
            )
    return "\n".join(lines)


def format_rejection(rejection: Rejection) -> str:
    if rejection.detail:
        return f"{rejection.message} ({rejection.detail})"
    return rejection.message

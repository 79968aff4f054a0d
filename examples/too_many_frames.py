"""Example: requests that cannot be laid out come back as rejections."""

from frame_hanger import LayoutRequest, Rejection, format_rejection, solve

CASES = [
    LayoutRequest.from_values(60, 80, 20, 15, 4, 60),
    LayoutRequest.from_values(60, 80, 20, 15, 3, 90),
    LayoutRequest.from_values(60, 80, 20, 15, 3, 60),
]


def main() -> None:
    for request in CASES:
        outcome = solve(request)
        print(request)
        if isinstance(outcome, Rejection):
            print(f"  rejected ({outcome.reason.value}): {format_rejection(outcome)}")
        else:
            print(f"  gap={outcome.gap:.2f} centers={list(outcome.picture_centers)}")


if __name__ == "__main__":
    main()

import math
import numbers

from .model import LayoutRequest

_REAL_FIELDS = ('wall_width', 'wall_height', 'picture_width', 'picture_height', 'hanging_height')


class ValidationError(Exception):
    pass


def _is_real(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate(request: LayoutRequest) -> None:
    for name in _REAL_FIELDS:
        value = getattr(request, name)
        if not _is_real(value):
            raise ValidationError(f'{name} must be a number (got {value!r})')
        if not math.isfinite(value):
            raise ValidationError(f'{name} must be finite (got {value!r})')
        if value <= 0:
            raise ValidationError(f'{name} must be positive (got {value!r})')

    qty = request.quantity
    if isinstance(qty, bool) or not isinstance(qty, numbers.Integral):
        raise ValidationError(f'quantity must be an integer (got {qty!r})')
    if qty < 1:
        raise ValidationError(f'quantity must be at least 1 (got {qty!r})')

    if request.hanging_height > request.wall_height:
        raise ValidationError(
            f'hanging_height {request.hanging_height!r} exceeds wall_height {request.wall_height!r}'
        )

"""Input/Output operations"""

from .parser import (
    InputError,
    OrderQtyInvalidFormat,
    OrderQtyInvalidValue,
    PackSizesInvalidFormat,
    PackSizeInvalidValue,
    RequestParser,
    extract_order_qty,
    extract_pack_sizes,
)
from .serializer import ResponseSerializer
from .saver import ResultSaver

__all__ = [
    'InputError', 'OrderQtyInvalidFormat', 'OrderQtyInvalidValue',
    'PackSizesInvalidFormat', 'PackSizeInvalidValue', 'RequestParser',
    'extract_order_qty', 'extract_pack_sizes', 'ResponseSerializer', 'ResultSaver'
]

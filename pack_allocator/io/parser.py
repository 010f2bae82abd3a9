"""Request input parsing and validation"""
import re
from typing import List, Mapping, Optional
from pack_allocator.config import ORDER_QTY_PARAM, PACK_SIZES_PARAM, DEFAULT_PACK_SIZES
from pack_allocator.models import Order

_INTEGER = re.compile(r'[+-]?[0-9]+')


class InputError(ValueError):
    """Raised when request input cannot be turned into an order"""

    message = "invalid input"

    def __init__(self, detail: str = None):
        super().__init__(self.message if detail is None else f"{self.message}: {detail}")
        self.detail = detail


class OrderQtyInvalidFormat(InputError):
    message = "invalid format for ordered items input (should be an integer value)"


class OrderQtyInvalidValue(InputError):
    message = "invalid value for ordered items input (should be a strictly positive integer)"


class PackSizesInvalidFormat(InputError):
    message = "invalid format for pack sizes input (should be a list of integer values)"


class PackSizeInvalidValue(InputError):
    message = "invalid value for pack size (every value should be strictly positive)"


def _to_int(text: str) -> Optional[int]:
    if not _INTEGER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # digit strings past the interpreter's conversion limit
        return None


def extract_order_qty(order_qty_str: str) -> int:
    """Extract the number of items ordered from the request input"""
    order_qty = _to_int(order_qty_str)
    if order_qty is None:
        raise OrderQtyInvalidFormat(repr(order_qty_str[:32]))

    if order_qty <= 0:
        raise OrderQtyInvalidValue(str(order_qty))

    return order_qty


def extract_pack_sizes(pack_sizes_str: str) -> List[int]:
    """Extract the list of available pack sizes from the request input"""
    pack_sizes = []
    for part in pack_sizes_str.split(','):
        part = part.strip()
        pack_size = _to_int(part)
        if pack_size is None:
            raise PackSizesInvalidFormat(repr(part[:32]))
        if pack_size <= 0:
            raise PackSizeInvalidValue(str(pack_size))
        pack_sizes.append(pack_size)

    return pack_sizes


class RequestParser:
    """Builds orders from request arguments"""

    def __init__(self, default_pack_sizes: str = DEFAULT_PACK_SIZES):
        self.default_pack_sizes = default_pack_sizes or None

    def parse(self, args: Mapping[str, str]) -> Order:
        """Parse query arguments into a validated order"""
        order_qty = extract_order_qty(args.get(ORDER_QTY_PARAM, ''))

        pack_sizes_str = args.get(PACK_SIZES_PARAM)
        if pack_sizes_str is None:
            pack_sizes_str = self.default_pack_sizes or ''

        return Order(order_qty, extract_pack_sizes(pack_sizes_str))

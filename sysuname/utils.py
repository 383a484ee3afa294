###############################################################################
#
# MIT License
#
# Copyright (c) 2025 The sysuname developers
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
###############################################################################
import datetime
import inspect
import re
from typing import Optional, Type, TypeVar

T = TypeVar("T")

MS_DATE_FORMAT = "%Y%m%d%H%M%S"

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


def get_all_subclasses(cls: Type[T]) -> set[Type[T]]:
    """Get an iterable with all subclasses of this class (not including this class)
    Subclasses are presented in no particular order

    Returns:
        An iterable of all subclasses of this class
    """
    subclasses: set[Type[T]] = set()
    for subclass in cls.__subclasses__():
        subclasses = subclasses.union(get_all_subclasses(subclass))
        if not inspect.isabstract(subclass):
            subclasses.add(subclass)
    return subclasses


def convert(value: Optional[str]) -> Optional[int]:
    """Convert an integer which was widened to a string by the instrumentation layer
    back into an int. uint64 values reported by WMI arrive as text.

    None is kept as None rather than being turned into 0.

    Args:
        value (Optional[str]): decimal string

    Returns:
        Optional[int]: integer value, None if input is None or not a decimal number
    """
    if value is None:
        return None
    value = value.strip()
    if not _INT_PATTERN.fullmatch(value):
        return None
    return int(value)


def convert_bool(value: Optional[str]) -> Optional[bool]:
    """Convert a WMI boolean string ("TRUE" / "FALSE") to a bool

    Args:
        value (Optional[str]): boolean string

    Returns:
        Optional[bool]: bool value, None if input is empty or not a boolean string
    """
    if not value:
        return None
    value = value.strip().upper()
    if value == "TRUE":
        return True
    if value == "FALSE":
        return False
    return None


def parse_ms_date(value: Optional[str]) -> Optional[datetime.datetime]:
    """Converts a CIM datetime string in the format '20040703074625.015625-360'
    into a datetime object. The fractional seconds and UTC offset suffix are discarded.

    CIM marks unknown date fields with '*', such values are reported as None.

    Args:
        value (Optional[str]): CIM datetime string

    Returns:
        Optional[datetime.datetime]: naive datetime, None for empty or unparsable input
    """
    if not value:
        return None
    try:
        return datetime.datetime.strptime(value.strip().split(".")[0], MS_DATE_FORMAT)
    except ValueError:
        return None


def parse_wmic_instances(text: str) -> list[dict[str, Optional[str]]]:
    """Parse the output of a `wmic <alias> get /value` query.

    Each instance is a block of Key=Value lines. wmic terminates lines with \\r\\r\\n, which
    text mode decoding turns into blank lines, so a new instance starts when a key repeats
    rather than at a blank line. Empty values are reported as None.

    Args:
        text (str): wmic output

    Returns:
        list[dict[str, Optional[str]]]: one dict per instance
    """
    instances: list[dict[str, Optional[str]]] = []
    current: dict[str, Optional[str]] = {}
    for line in text.splitlines():
        line = line.strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key in current:
            instances.append(current)
            current = {}
        value = value.strip()
        current[key] = value if value else None
    if current:
        instances.append(current)
    return instances


def hex_to_int(hex_in: str) -> int | None:
    """Converts given hex string to int

    Args:
        hex_in: hexadecimal string

    Returns:
        int: hexadecimal converted to int
    """
    try:
        if not is_hex(hex_in):
            return None
        return int(hex_in, 16)
    except TypeError:
        return None


def is_hex(hex_in: str) -> bool:
    """Returns True or False based on whether the input hexadecimal is indeed hexadecimal

    Args:
        hex_in: hexadecimal string

    Returns:
        bool: True/False whether the input hexadecimal is indeed hexadecimal
    """
    if not hex_in:
        return False

    hex_pattern = re.compile(r"^(0x)?[0-9a-fA-F]+$")
    return bool(hex_pattern.fullmatch(hex_in))


def strip_or_none(value: Optional[str]) -> Optional[str]:
    """Strip a string, mapping empty results to None"""
    if value is None:
        return None
    value = value.strip()
    return value if value else None

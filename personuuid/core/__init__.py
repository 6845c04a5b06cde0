"""personuuid.core -- result and error values, identity types, digit primitives."""

from personuuid.core.bcd import decode_digits as decode_digits
from personuuid.core.bcd import encode_digits as encode_digits
from personuuid.core.calendar import days_in_month as days_in_month
from personuuid.core.calendar import is_leap_year as is_leap_year
from personuuid.core.calendar import is_valid_date as is_valid_date
from personuuid.core.errors import ChecksumMismatchError as ChecksumMismatchError
from personuuid.core.errors import IdentityError as IdentityError
from personuuid.core.errors import InvalidDateError as InvalidDateError
from personuuid.core.errors import MalformedNumberError as MalformedNumberError
from personuuid.core.errors import NonConformantBinaryError as NonConformantBinaryError
from personuuid.core.errors import UnclassifiableNumberError as UnclassifiableNumberError
from personuuid.core.errors import UnparsableTextError as UnparsableTextError
from personuuid.core.luhn import check_digit_of as check_digit_of
from personuuid.core.luhn import check_digit_ok as check_digit_ok
from personuuid.core.luhn import luhn as luhn
from personuuid.core.result import Err as Err
from personuuid.core.result import Ok as Ok
from personuuid.core.result import Result as Result
from personuuid.core.result import sequence as sequence
from personuuid.core.result import unwrap as unwrap
from personuuid.core.types import IdType as IdType

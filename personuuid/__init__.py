"""personuuid -- Swedish identity numbers encoded as version 1 shaped UUIDs.

Organisation, personal, coordination and placeholder numbers are stored
one decimal digit per nybble, so the canonical UUID text still reads as
the identity number:

    >>> from personuuid import parse, format_uuid, unwrap
    >>> format_uuid(unwrap(parse("556809-9963")))
    '00556809-9963-1000-9000-d59a20d06c1a'
"""

from personuuid.codec import decode as decode
from personuuid.codec import encode as encode
from personuuid.codec import format_uuid as format_uuid
from personuuid.codec import from_uuid as from_uuid
from personuuid.codec import is_conformant as is_conformant
from personuuid.codec import is_person_uuid as is_person_uuid
from personuuid.codec import parse as parse
from personuuid.codec import parse_many as parse_many
from personuuid.codec import to_uuid as to_uuid
from personuuid.core import Err as Err
from personuuid.core import IdentityError as IdentityError
from personuuid.core import IdType as IdType
from personuuid.core import Ok as Ok
from personuuid.core import Result as Result
from personuuid.core import unwrap as unwrap
from personuuid.identity import IdentityNumber as IdentityNumber
from personuuid.identity import classify as classify
from personuuid.infra import DEFAULT_REVISION as DEFAULT_REVISION
from personuuid.infra import REVISION_TYPED as REVISION_TYPED
from personuuid.infra import REVISION_UNTYPED as REVISION_UNTYPED
from personuuid.infra import SchemeRevision as SchemeRevision

__version__ = "0.1.0"

"""personuuid.codec -- person UUID binary layout and text entry points."""

from personuuid.codec.binary import decode as decode
from personuuid.codec.binary import encode as encode
from personuuid.codec.binary import from_uuid as from_uuid
from personuuid.codec.binary import is_conformant as is_conformant
from personuuid.codec.binary import is_person_uuid as is_person_uuid
from personuuid.codec.binary import to_uuid as to_uuid
from personuuid.codec.text import format_uuid as format_uuid
from personuuid.codec.text import parse as parse
from personuuid.codec.text import parse_many as parse_many

"""personuuid.infra -- layout constants and scheme revision configuration."""

from personuuid.infra.config import DEFAULT_REVISION as DEFAULT_REVISION
from personuuid.infra.config import MAX_NUMBER as MAX_NUMBER
from personuuid.infra.config import MAX_SERIAL as MAX_SERIAL
from personuuid.infra.config import REVISION_TYPED as REVISION_TYPED
from personuuid.infra.config import REVISION_UNTYPED as REVISION_UNTYPED
from personuuid.infra.config import SchemeRevision as SchemeRevision

"""personuuid.identity -- classification and the validated identity record."""

from personuuid.identity.classifier import classify as classify
from personuuid.identity.record import IdentityNumber as IdentityNumber

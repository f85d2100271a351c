"""Shared schema types for catalog documents."""

from enum import Enum


class Language(str, Enum):
    """Language codes used as keys in localized catalog fields."""

    KR = "KR"
    EN = "EN"
    CN = "CN"


# The only language whose content is exported.
PRIMARY_LANGUAGE = Language.KR

LocalizedText = dict[Language, str]
